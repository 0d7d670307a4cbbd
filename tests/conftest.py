import pytest

from setup_ui.web.view import RenderContext


class RecordingContext:
    """Render context double recording what widgets hand to it."""

    def __init__(self):
        self.img_calls = []
        self.qlink_calls = []

    def img(self, src, width=None, height=None):
        self.img_calls.append((src, width, height))
        return f"[img {src} {width}x{height}]"

    def qlink(self, caption, target, params=None, quote=True):
        self.qlink_calls.append((caption, target, params, quote))
        return f"[link {target} {caption}]"


@pytest.fixture
def recording_context():
    return RecordingContext()


@pytest.fixture
def render_context():
    return RenderContext(base_url="/setup-ui")
