"""
Pytest configuration and shared fixtures for test suite.
"""

import pytest
import tempfile
import shutil
from pathlib import Path

import numpy as np
from PIL import Image


def make_solid_image(color='red', size=(100, 100)):
    """Solid color RGB image."""
    return Image.new('RGB', size, color=color)


def make_gradient_image(size=100, start=(0, 0), end=None):
    """
    Linear white-to-black gradient along the start -> end vector.

    Pixels before start are white, pixels past end are black.
    """
    if end is None:
        end = (size, size)
    dx, dy = end[0] - start[0], end[1] - start[1]
    ys, xs = np.mgrid[0:size, 0:size].astype(np.float64)
    t = ((xs - start[0]) * dx + (ys - start[1]) * dy) / float(dx * dx + dy * dy)
    values = np.clip(1.0 - t, 0.0, 1.0) * 255.0
    return Image.fromarray(np.round(values).astype(np.uint8)).convert('RGB')


def make_half_pattern_image(inverted=False, size=100):
    """Left half white and right half black, or the reverse when inverted."""
    left, right = ('black', 'white') if inverted else ('white', 'black')
    img = Image.new('RGB', (size, size), color=left)
    img.paste(Image.new('RGB', (size - size // 2, size), color=right), (size // 2, 0))
    return img


@pytest.fixture(autouse=True)
def isolated_user_config(tmp_path, monkeypatch):
    """Point user config at an empty directory so local settings never leak in."""
    from pixelprint.user_config import get_user_config

    config_dir = tmp_path / 'config'
    monkeypatch.setenv('PIXELPRINT_CONFIG_DIR', str(config_dir))
    for var in (
        'PIXELPRINT_ALGORITHM',
        'PIXELPRINT_PRECISION',
        'PIXELPRINT_WORKERS',
        'PIXELPRINT_RESAMPLE',
        'PIXELPRINT_SIMILARITY_RATIO',
    ):
        monkeypatch.delenv(var, raising=False)
    get_user_config().reload()
    yield config_dir
    get_user_config().reload()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def red_image():
    return make_solid_image('red')


@pytest.fixture
def gradient_image():
    return make_gradient_image()


@pytest.fixture
def shifted_gradient_image():
    """Same gradient drawn along a slightly different direction."""
    return make_gradient_image(start=(10, 0), end=(90, 100))


@pytest.fixture
def half_pattern_images():
    """(normal, inverted) half-black/half-white images."""
    return make_half_pattern_image(), make_half_pattern_image(inverted=True)


@pytest.fixture
def sample_images(temp_dir):
    """
    Create a set of sample image files for testing.

    Returns:
        dict with paths to:
        - red.png, red_copy.png (identical content)
        - red_large.png (same content, higher resolution)
        - gradient.png, gradient_shifted.png (similar gradients)
        - half.png, half_inverted.png (opposite patterns)
        - corrupted.png (not an image despite the extension)
        - notes.txt (ignored by file discovery)
    """
    images = {}

    def save(name, img):
        path = temp_dir / name
        img.save(path, 'PNG')
        images[path.stem] = str(path)

    save('red.png', make_solid_image('red'))
    save('red_copy.png', make_solid_image('red'))
    save('red_large.png', make_solid_image('red', (200, 200)))
    save('gradient.png', make_gradient_image())
    save('gradient_shifted.png', make_gradient_image(start=(10, 0), end=(90, 100)))
    save('half.png', make_half_pattern_image())
    save('half_inverted.png', make_half_pattern_image(inverted=True))

    corrupted = temp_dir / "corrupted.png"
    corrupted.write_text("not an image")
    images['corrupted'] = str(corrupted)

    notes = temp_dir / "notes.txt"
    notes.write_text("not an image either")
    images['notes'] = str(notes)

    return images
