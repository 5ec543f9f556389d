import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'assemble_helpers' and tests/helpers as 'helpers'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from assemble_helpers.plugin import helpers as helpers_plugin
from assemble_helpers.context import HelperContext, HelperOptions
from helpers.memory_app import MemoryApp


@pytest.fixture
def app(tmp_path: Path) -> MemoryApp:
    """In-memory app rooted at ``tmp_path`` with all helpers registered."""
    memory_app = MemoryApp(cwd=tmp_path)
    memory_app.use(helpers_plugin())
    return memory_app


@pytest.fixture
def bare_app(tmp_path: Path) -> MemoryApp:
    """In-memory app without helpers, for calling helpers directly."""
    return MemoryApp(cwd=tmp_path)


@pytest.fixture
def make_ctx(bare_app: MemoryApp):
    """Factory building a HelperContext for ``bare_app``."""

    def _make(view=None, **context):
        return HelperContext(
            app=bare_app,
            view=view,
            options=dict(bare_app.options),
            context={**bare_app.data, **context},
        )

    return _make


@pytest.fixture
def block():
    """Factory for block-call HelperOptions recording their render contexts."""

    def _block(name: str = "helper", hash=None, fn=None, inverse=None) -> HelperOptions:
        return HelperOptions(
            name=name,
            hash=dict(hash or {}),
            fn=fn or (lambda context, data=None, block_params=None: f"fn:{context!r}"),
            inverse=inverse or (lambda context, data=None, block_params=None: "inverse"),
        )

    return _block
