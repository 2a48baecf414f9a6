"""Pytest configuration and fixtures."""

import sys
import tempfile
from pathlib import Path
from typing import Dict

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

import pytest
import structlog

from apicli.config import AppConfig
from apicli.templating import VariableResolver


SAMPLE_TXT_CATALOG = """\
service name url method headers body
httpbin get https://httpbin.org/get GET {}
httpbin post https://httpbin.org/post POST "{""Content-Type"": ""application/json"", ""X-Trace"": ""$TRACE_ID""}" "{""value"": ""$VALUE""}"
catfact getFact https://catfact.ninja/fact GET null
openai chat https://api.openai.com/v1/chat/completions POST "BEARER $!API_KEY" "{""model"": ""$!MODEL"", ""messages"": [{""role"": ""user"", ""content"": ""$!PROMPT""}]}"
openrouter chat https://openrouter.ai/api/v1/chat/completions POST "BEARER $!API_KEY" "{""model"": ""$!MODEL"", ""messages"": [{""role"": ""system"", ""content"": ""$SYSTEM""}, {""role"": ""user"", ""content"": ""$!PROMPT""}], ""provider"": {""order"": [""$PROVIDER""]}}"
"""

SAMPLE_TOML_CATALOG = """\
[apis."httpbin.get"]
url = "https://httpbin.org/get"
method = "GET"

[apis."github.repo.v2"]
url = "https://api.github.com/repos/$!OWNER/$!REPO"
method = "GET"
timeout = 5

[apis."github.repo.v2".headers]
Accept = "application/vnd.github+json"
Authorization = "token $GITHUB_TOKEN"

[apis."cerebras.chat"]
url = "https://api.cerebras.ai/v1/chat/completions"
method = "POST"
headers = "BEARER $!CEREBRAS_API_KEY"
body = '{"model": "$!MODEL", "messages": [{"role": "user", "content": "$!PROMPT"}]}'
"""


@pytest.fixture
def temp_dir():
    """Temporary directory for test artifacts."""
    with tempfile.TemporaryDirectory() as tmp:
        yield Path(tmp)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo structlog configuration done by CLI invocations."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def environ() -> Dict[str, str]:
    """Empty environment mapping for deterministic resolution."""
    return {}


@pytest.fixture
def resolver(environ: Dict[str, str]) -> VariableResolver:
    """Resolver bound to the test environment mapping."""
    return VariableResolver(environ)


@pytest.fixture
def sample_config(temp_dir: Path) -> AppConfig:
    """Configuration whose default catalog directory is empty."""
    config_dir = temp_dir / ".apicli"
    config_dir.mkdir()
    return AppConfig(config_dir=config_dir)


@pytest.fixture
def txt_catalog(temp_dir: Path) -> Path:
    """Sample tabular catalog file."""
    path = temp_dir / "apis.txt"
    path.write_text(SAMPLE_TXT_CATALOG)
    return path


@pytest.fixture
def toml_catalog(temp_dir: Path) -> Path:
    """Sample TOML catalog file."""
    path = temp_dir / "apicli.toml"
    path.write_text(SAMPLE_TOML_CATALOG)
    return path
