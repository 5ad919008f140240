from .errors import ConversionError
from .state import Hsb, Rgb, Xy
from .color import hex_to_rgb, hex_to_xy, hsl_to_hsb, rgb_to_hex_string, rgb_to_xy
from .color_temp import (
    KelvinXyLookup,
    default_lookup,
    kelvin_to_mireds,
    mireds_to_kelvin,
    mireds_to_xy,
    xy_to_mireds,
)
from .byte_coder import (
    convert_decimal_value_to_2_byte_hex_array,
    convert_decimal_value_to_byte_array,
    convert_multi_byte_number_payload_to_single_decimal_number,
)
from .utils import get_key_by_value, get_random_int, has_endpoints
