# attachment_validations/messages.py
from django.utils.translation import gettext_lazy as _

DEFAULT_MESSAGES = {
    # presence / count
    "blank": _("This field cannot be blank."),
    "limit_out_of_range": _("Total number of files must be between %(min)s and %(max)s (there are %(count)s files attached)."),
    "limit_out_of_range_min": _("Total number of files must be at least %(min)s (there are %(count)s files attached)."),
    "limit_out_of_range_max": _("Total number of files must be at most %(max)s (there are %(count)s files attached)."),
    # content type
    "content_type_invalid": _("%(filename)s has an invalid content type (authorized content types are %(authorized_human_content_types)s)."),
    "content_type_spoofed": _("%(filename)s has a content type that does not match its content (detected %(detected_human_content_type)s)."),
    # size
    "file_size_not_less_than": _("File size of %(filename)s must be less than %(max)s (current size is %(file_size)s)."),
    "file_size_not_less_than_or_equal_to": _("File size of %(filename)s must be less than or equal to %(max)s (current size is %(file_size)s)."),
    "file_size_not_greater_than": _("File size of %(filename)s must be greater than %(min)s (current size is %(file_size)s)."),
    "file_size_not_greater_than_or_equal_to": _("File size of %(filename)s must be greater than or equal to %(min)s (current size is %(file_size)s)."),
    "file_size_not_between": _("File size of %(filename)s must be between %(min)s and %(max)s (current size is %(file_size)s)."),
    "total_file_size_not_less_than": _("Total file size must be less than %(max)s (current size is %(total_file_size)s)."),
    "total_file_size_not_less_than_or_equal_to": _("Total file size must be less than or equal to %(max)s (current size is %(total_file_size)s)."),
    "total_file_size_not_greater_than": _("Total file size must be greater than %(min)s (current size is %(total_file_size)s)."),
    "total_file_size_not_greater_than_or_equal_to": _("Total file size must be greater than or equal to %(min)s (current size is %(total_file_size)s)."),
    "total_file_size_not_between": _("Total file size must be between %(min)s and %(max)s (current size is %(total_file_size)s)."),
    # media
    "media_metadata_missing": _("%(filename)s is not a valid media file."),
    "image_not_processable": _("%(filename)s is not a valid image."),
    # dimensions
    "dimension_min_not_included_in": _("Image dimensions of %(filename)s must be greater than or equal to %(width)s x %(height)s pixels."),
    "dimension_max_not_included_in": _("Image dimensions of %(filename)s must be less than or equal to %(width)s x %(height)s pixels."),
    "dimension_width_not_included_in": _("Width of %(filename)s must be between %(min)s and %(max)s pixels."),
    "dimension_height_not_included_in": _("Height of %(filename)s must be between %(min)s and %(max)s pixels."),
    "dimension_width_not_greater_than_or_equal_to": _("Width of %(filename)s must be greater than or equal to %(length)s pixels."),
    "dimension_height_not_greater_than_or_equal_to": _("Height of %(filename)s must be greater than or equal to %(length)s pixels."),
    "dimension_width_not_less_than_or_equal_to": _("Width of %(filename)s must be less than or equal to %(length)s pixels."),
    "dimension_height_not_less_than_or_equal_to": _("Height of %(filename)s must be less than or equal to %(length)s pixels."),
    "dimension_width_not_equal_to": _("Width of %(filename)s must be equal to %(length)s pixels."),
    "dimension_height_not_equal_to": _("Height of %(filename)s must be equal to %(length)s pixels."),
    # aspect ratio
    "aspect_ratio_not_square": _("%(filename)s must be square (current file is %(width)sx%(height)spx)."),
    "aspect_ratio_not_portrait": _("%(filename)s must be portrait (current file is %(width)sx%(height)spx)."),
    "aspect_ratio_not_landscape": _("%(filename)s must be landscape (current file is %(width)sx%(height)spx)."),
    "aspect_ratio_is_not": _("%(filename)s must have an aspect ratio of %(aspect_ratio)s (current file is %(width)sx%(height)spx)."),
    "aspect_ratio_invalid": _("%(filename)s has an invalid aspect ratio (valid aspect ratios are %(authorized_aspect_ratios)s)."),
}


def message_for(code: str):
    return DEFAULT_MESSAGES[code]
