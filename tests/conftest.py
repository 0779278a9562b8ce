"""Pytest configuration and global fixtures.

Fixtures build small synthetic images with Pillow so tests never depend on
files outside the temporary directory or on network access.

Common Fixtures:
    - make_image: factory writing an image to tmp_path and returning its path
    - encode_image: factory returning encoded image bytes
    - mock_response: factory for a fake ``requests`` response

Example:
    def test_something(make_image):
        path = make_image((10, 10), (255, 0, 0))
        analyzer = ImageAnalyzer.from_file(path)
"""

import io
from unittest.mock import MagicMock

import pytest
from PIL import Image


@pytest.fixture
def encode_image():
    """Provide a factory encoding a solid (or given) image into bytes.

    Example:
        data = encode_image((4, 4), (0, 0, 0), fmt="JPEG")
    """

    def _encode(size=(8, 8), color=(0, 0, 0), fmt="PNG", mode="RGB", image=None):
        img = image if image is not None else Image.new(mode, size, color)
        buf = io.BytesIO()
        img.save(buf, format=fmt)
        return buf.getvalue()

    return _encode


@pytest.fixture
def make_image(tmp_path, encode_image):
    """Provide a factory writing an encoded image into tmp_path.

    Returns:
        Callable returning the Path of the written file.
    """
    counter = {"n": 0}

    def _make(size=(8, 8), color=(0, 0, 0), fmt="PNG", mode="RGB", image=None):
        counter["n"] += 1
        path = tmp_path / f"image_{counter['n']}.{fmt.lower()}"
        path.write_bytes(encode_image(size, color, fmt=fmt, mode=mode, image=image))
        return path

    return _make


@pytest.fixture
def mock_response():
    """Provide a factory for fake ``requests.Response`` objects."""

    def _response(content=b"", content_type="image/jpeg", status_error=None):
        response = MagicMock()
        response.content = content
        response.headers = {"Content-Type": content_type} if content_type else {}
        if status_error is not None:
            response.raise_for_status.side_effect = status_error
        else:
            response.raise_for_status.return_value = None
        return response

    return _response


def pytest_collection_modifyitems(config, items):
    """Auto-mark all tests in tests/unit as unit tests."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
