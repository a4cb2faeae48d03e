import httpx

from clients.github import GitHubClient


class RecordingTransport(httpx.MockTransport):
    """MockTransport serving fixed JSON per path and remembering requests."""

    def __init__(self, routes: dict) -> None:
        self.requests = []
        self._routes = routes
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        val = self._routes.get(request.url.path)
        if val is None:
            return httpx.Response(404, json={"message": "Not Found"})
        if isinstance(val, httpx.Response):
            return val
        return httpx.Response(200, json=val)


def github_client(routes: dict) -> tuple[GitHubClient, RecordingTransport]:
    transport = RecordingTransport(routes)
    return GitHubClient(transport=transport), transport
