import pytest

from bundlepack.core.sizes import format_size


@pytest.mark.parametrize(
    ("size", "expected"),
    [
        (None, "0 B"),
        (0, "0 B"),
        (1023, "1023 B"),
        (1024, "1 KiB"),
        (1536, "1.5 KiB"),
        (-2048, "2 KiB"),
        (12000, "11.72 KiB"),
        (1048576, "1 MiB"),
        (1047552, "1023 KiB"),
        (1048575, "1 MiB"),
        (1024**3 - 1, "1 GiB"),
        (3 * 1024**3, "3 GiB"),
    ],
)
def test_format_size_uses_iec_units(size: int | None, expected: str) -> None:
    assert format_size(size) == expected
