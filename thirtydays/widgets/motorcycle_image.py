"""Square motorcycle picture with rounded corners"""

from kivy.properties import StringProperty
from kivy.uix.image import Image

from thirtydays.lang import load_kv_path

load_kv_path(__file__)


class MotorcycleImage(Image):
    content_description = StringProperty()
