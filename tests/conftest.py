import base64
import os

os.environ.setdefault('KIVY_NO_ARGS', '1')
os.environ.setdefault('KIVY_NO_CONSOLELOG', '1')
os.environ.setdefault('KIVY_NO_FILELOG', '1')
os.environ.setdefault('KIVY_LOG_MODE', 'PYTHON')

import pytest

from thirtydays.model import Motorcycle
from thirtydays.resources import AssetResolver, StringResolver

# Smallest valid PNG (1x1)
PNG_BYTES = base64.b64decode(
    'iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=='
)

SAMPLE_STRINGS = """
[en]
app_name = "Sample Days"
day_template = "Day {day}"
expand_button_content_description = "expand button"
harley = "Harley"
ducati = "Ducati"
quote1 = "Quote1"
quote2 = "Quote2"

[pt]
day_template = "Dia {day}"
expand_button_content_description = "botão expandir"
quote1 = "Citação1"
"""


@pytest.fixture
def strings_file(tmp_path):
    path = tmp_path / 'strings.toml'
    path.write_text(SAMPLE_STRINGS, encoding='utf-8')
    return path


@pytest.fixture
def strings(strings_file) -> StringResolver:
    return StringResolver(strings_file, locale='en')


@pytest.fixture
def assets_dir(tmp_path):
    images = tmp_path / 'images'
    images.mkdir()
    for name in ('img_a', 'img_b', 'placeholder'):
        (images / f'{name}.png').write_bytes(PNG_BYTES)
    return images


@pytest.fixture
def assets(assets_dir) -> AssetResolver:
    return AssetResolver(assets_dir)


@pytest.fixture
def harley() -> Motorcycle:
    return Motorcycle(make='harley', quote='quote1', image='img_a')


@pytest.fixture
def ducati() -> Motorcycle:
    return Motorcycle(make='ducati', quote='quote2', image='img_b')
