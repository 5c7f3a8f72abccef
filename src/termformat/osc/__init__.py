"""OSC (Operating System Command) encoders for termformat.

Public API:
    encode_hyperlink -- OSC 8 hyperlinks
    encode_image -- iTerm2 OSC 1337 inline images
"""

from termformat.osc.hyperlink import encode_hyperlink
from termformat.osc.image import encode_image, image_arguments

__all__ = ["encode_hyperlink", "encode_image", "image_arguments"]
