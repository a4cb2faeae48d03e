import sys
import types
import uuid
import importlib.util
from pathlib import Path


def _find_server_py() -> Path:
    root = Path(__file__).resolve().parents[2]
    candidates = [
        root / "src" / "server" / "server.py",
        root / "server" / "server.py",
    ]
    for p in candidates:
        if p.exists():
            return p
    raise FileNotFoundError(f"Could not find server.py. Tried: {candidates}")


def _install_fake_modules(monkeypatch, captures: dict):
    # ---- Fake mcp.server.fastmcp.FastMCP ----
    mcp_mod = types.ModuleType("mcp")
    mcp_server_mod = types.ModuleType("mcp.server")
    fastmcp_mod = types.ModuleType("mcp.server.fastmcp")

    class DummyFastMCP:
        def __init__(self, name: str):
            captures["fastmcp_name"] = name
            captures["mcp_instance"] = self
            self.run_calls = []

        def run(self, *, transport: str):
            self.run_calls.append({"transport": transport})
            captures["run_calls"] = list(self.run_calls)

    fastmcp_mod.FastMCP = DummyFastMCP

    mcp_mod.__path__ = []
    mcp_server_mod.__path__ = []

    monkeypatch.setitem(sys.modules, "mcp", mcp_mod)
    monkeypatch.setitem(sys.modules, "mcp.server", mcp_server_mod)
    monkeypatch.setitem(sys.modules, "mcp.server.fastmcp", fastmcp_mod)

    # ---- Fake config ----
    config_mod = types.ModuleType("config")
    config_mod.GITHUB_API_URL = "https://ghe.example/api/v3"
    config_mod.GITHUB_TIMEOUT = 12.5
    config_mod.HTTP_VERIFY = True
    config_mod.LOG_LEVEL = "DEBUG"
    monkeypatch.setitem(sys.modules, "config", config_mod)

    # ---- Fake logging setup ----
    log_mod = types.ModuleType("core.log")

    def setup_logging(level):
        captures["setup_logging_calls"] = captures.get("setup_logging_calls", []) + [level]

    log_mod.setup_logging = setup_logging
    monkeypatch.setitem(sys.modules, "core.log", log_mod)

    # ---- Fake clients ----
    def _ensure_pkg(name: str):
        pkg = types.ModuleType(name)
        pkg.__path__ = []
        monkeypatch.setitem(sys.modules, name, pkg)

    _ensure_pkg("clients")
    gh_mod = types.ModuleType("clients.github")

    class FakeGitHubClient:
        def __init__(self, *, base_url=None, timeout: float = 20.0, verify: bool = True):
            captures["github_client_ctor_calls"] = captures.get("github_client_ctor_calls", []) + [
                {"base_url": base_url, "timeout": timeout, "verify": verify}
            ]
            captures["github_client_instance"] = self

    gh_mod.GitHubClient = FakeGitHubClient
    monkeypatch.setitem(sys.modules, "clients.github", gh_mod)

    # ---- Fake tools ----
    _ensure_pkg("tools")

    for tool_name in ("get_repo_all_directories", "get_repo_directories", "get_repo_file"):
        tool_mod = types.ModuleType(f"tools.{tool_name}")

        def register(mcp, *, github_client=None, _name=tool_name):
            key = f"register_{_name}_calls"
            captures[key] = captures.get(key, []) + [{"mcp": mcp, "github_client": github_client}]

        tool_mod.register = register
        monkeypatch.setitem(sys.modules, f"tools.{tool_name}", tool_mod)


def _load_server_module(monkeypatch, captures: dict):
    _install_fake_modules(monkeypatch, captures)

    server_path = _find_server_py()
    mod_name = f"server_under_test_{uuid.uuid4().hex}"
    spec = importlib.util.spec_from_file_location(mod_name, server_path)
    assert spec and spec.loader

    module = importlib.util.module_from_spec(spec)
    monkeypatch.setitem(sys.modules, mod_name, module)
    spec.loader.exec_module(module)
    return module


def test_server_registers_tools_with_shared_client(monkeypatch):
    captures = {}
    module = _load_server_module(monkeypatch, captures)

    assert captures["fastmcp_name"] == "github-repo-mcp"
    mcp = captures["mcp_instance"]

    # One client for the process, built from configuration
    assert captures["github_client_ctor_calls"] == [
        {"base_url": "https://ghe.example/api/v3", "timeout": 12.5, "verify": True}
    ]
    client = captures["github_client_instance"]

    for tool_name in ("get_repo_all_directories", "get_repo_directories", "get_repo_file"):
        calls = captures.get(f"register_{tool_name}_calls", [])
        assert len(calls) == 1
        assert calls[0]["mcp"] is mcp
        assert calls[0]["github_client"] is client

    # Logging is configured only when the server actually starts
    assert "setup_logging_calls" not in captures

    module.main()
    assert captures["setup_logging_calls"] == ["DEBUG"]
    assert captures["run_calls"] == [{"transport": "stdio"}]
