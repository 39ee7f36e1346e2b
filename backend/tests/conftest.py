import os, sys, pytest
import textwrap
from pathlib import Path
# Ensure backend directory is on path so 'openapi_bundler' can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
from openapi_bundler.preview import create_app
from openapi_bundler.config.layout import BundleLayout

BASE_YAML = """\
openapi: 3.0.0
info:
  title: X
  version: '1.0'
"""


class FragmentTree:
    """Builds an openapi/ source tree under a temporary project root."""

    def __init__(self, root: Path):
        self.root = root
        self.source = root / 'openapi'

    def write(self, relpath: str, text: str) -> Path:
        path = self.source / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(text), encoding='utf-8')
        return path

    def base(self, text: str = BASE_YAML) -> Path:
        return self.write('base.yaml', text)

    def mkdir(self, relpath: str) -> Path:
        path = self.source / relpath
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def layout(self) -> BundleLayout:
        return BundleLayout.from_root(self.root)


@pytest.fixture()
def tree(tmp_path):
    return FragmentTree(tmp_path)


@pytest.fixture()
def app_instance(tree):
    app = create_app({'OPENAPI_ROOT': str(tree.root), 'OPENAPI_STRICT': False})
    yield app


@pytest.fixture()
def client(app_instance):
    return app_instance.test_client()
