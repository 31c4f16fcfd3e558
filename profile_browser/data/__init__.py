from .readers import decode_upload, get_cat_colors, parse_single_col_text, read_single_col_file
from .text_utils import check_bionf_format, replace_home_character, scale01, substr_left, substr_right

__all__ = [
    "decode_upload",
    "get_cat_colors",
    "parse_single_col_text",
    "read_single_col_file",
    "check_bionf_format",
    "replace_home_character",
    "scale01",
    "substr_left",
    "substr_right",
]
