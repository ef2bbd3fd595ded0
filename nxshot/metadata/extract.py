from collections.abc import Mapping

from .. import config
from ..catalog import resolve_name
from ..exceptions import CaptureFormatError
from ..models import CaptureFields, CaptureRecord, FileEntry
from ..scanning.classifier import capture_kind


def _parse_int(name: str, part: slice, field: str) -> int:
    text = name[part]
    if not (text.isascii() and text.isdigit()):
        raise CaptureFormatError(f"{name}: {field} {text!r} is not numeric")
    return int(text)


def parse_capture_name(name: str) -> CaptureFields:
    """
    Slices the timestamp and application identifier out of a capture filename.

    Layout (offsets are fixed):
        YYYYMMDDhhmmss + 2 digits + "-" + 32-char identifier + extension

    The month is returned zero-based. No range checks are made.

    Raises:
        CaptureFormatError: if the name is too short or a timestamp field is
                            not made of digits.
    """
    if len(name) < config.IDENTIFIER_SLICE.stop:
        raise CaptureFormatError(f"{name}: too short for a capture filename")

    return CaptureFields(
        year=_parse_int(name, config.YEAR_SLICE, "year"),
        month=_parse_int(name, config.MONTH_SLICE, "month") - 1,
        day=_parse_int(name, config.DAY_SLICE, "day"),
        hour=_parse_int(name, config.HOUR_SLICE, "hour"),
        minute=_parse_int(name, config.MINUTE_SLICE, "minute"),
        second=_parse_int(name, config.SECOND_SLICE, "second"),
        identifier=name[config.IDENTIFIER_SLICE],
    )


def extract_record(entry: FileEntry, catalog: Mapping) -> CaptureRecord:
    """
    Parses a classified entry and resolves its application name.

    Raises:
        CaptureFormatError: if the entry is not a capture file.
    """
    kind = capture_kind(entry.name)
    if kind is None:
        raise CaptureFormatError(f"{entry.name}: not a {config.CAPTURE_NAME_LENGTH}-character "
                                 f"{config.IMAGE_EXT} or {config.VIDEO_EXT} capture")
    fields = parse_capture_name(entry.name)
    return CaptureRecord(
        year=fields.year,
        month=fields.month,
        day=fields.day,
        hour=fields.hour,
        minute=fields.minute,
        second=fields.second,
        identifier=fields.identifier,
        display_name=resolve_name(fields.identifier, catalog),
        entry=entry,
        kind=kind,
    )
