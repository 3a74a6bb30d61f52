import json
import re
from pathlib import Path

import pytest

from bundlepack.core.models import SizedEntity
from bundlepack.stats import (
    StatsFileError,
    StatsValidationError,
    parse_stats,
    read_stats_file,
)

STATS_DIR = Path(__file__).resolve().parents[1] / "examples" / "stats"


def test_read_stats_file_parses_assets_and_flattened_modules() -> None:
    stats = read_stats_file(STATS_DIR / "base.json")

    assert stats.assets[0] == SizedEntity("main.js", 102400, gzip_size=30720)
    assert stats.assets[2] == SizedEntity("legacy.js", 4096)
    assert stats.modules is not None
    assert [module.name for module in stats.modules] == [
        "./src/index.js",
        "./src/app.js",
        "./src/legacy.js",
        "./src/widgets/index.js",
        "./src/widgets/button.js",
        "./node_modules/react/index.js",
    ]


def test_parse_stats_without_chunks_uses_top_level_modules() -> None:
    stats = parse_stats(
        {
            "assets": [{"name": "a.js", "size": 10}],
            "modules": [{"name": "./a.js", "size": 10}],
        }
    )

    assert stats.modules == (SizedEntity("./a.js", 10),)


def test_parse_stats_flattens_nested_concatenated_modules_in_order() -> None:
    stats = parse_stats(
        {
            "assets": [],
            "modules": [
                {
                    "name": "./src/a.js + 2 modules",
                    "size": 30,
                    "modules": [
                        {"name": "./src/a.js", "size": 10},
                        {
                            "name": "./src/b.js + 1 modules",
                            "size": 15,
                            "modules": [
                                {"name": "./src/b.js", "size": 8},
                                {"name": "./src/c.js", "size": 7},
                            ],
                        },
                    ],
                },
                {"name": "./src/d.js", "size": 4},
                {"name": "./src/a.js", "size": 99},
            ],
        }
    )

    assert stats.modules == (
        SizedEntity("./src/a.js", 10),
        SizedEntity("./src/b.js", 8),
        SizedEntity("./src/c.js", 7),
        SizedEntity("./src/d.js", 4),
    )


def test_parse_stats_handles_many_modules() -> None:
    modules = [{"name": f"./src/m{index}.js", "size": index} for index in range(20000)]

    stats = parse_stats({"assets": [], "modules": modules})

    assert stats.modules is not None
    assert len(stats.modules) == 20000
    assert stats.modules[-1] == SizedEntity("./src/m19999.js", 19999)


def test_parse_stats_without_module_data() -> None:
    stats = parse_stats({"assets": [{"name": "a.js", "size": 10}]})

    assert stats.modules is None
    assert stats.has_modules is False


def test_parse_stats_chunk_without_modules_list() -> None:
    stats = parse_stats({"assets": [], "chunks": [{"id": 0}]})

    assert stats.assets == ()
    assert stats.modules == ()


def test_parse_stats_ignores_gzip_size_on_modules() -> None:
    stats = parse_stats(
        {
            "assets": [],
            "modules": [{"name": "./a.js", "size": 10, "gzipSize": 3}],
        }
    )

    assert stats.modules == (SizedEntity("./a.js", 10),)


@pytest.mark.parametrize(
    ("payload", "location"),
    [
        ({}, "$"),
        ({"assets": {}}, "assets"),
        ({"assets": [{"name": "a.js"}]}, "assets.0"),
        ({"assets": [{"name": "a.js", "size": -1}]}, "assets.0.size"),
        ({"assets": [{"name": "a.js", "size": "12"}]}, "assets.0.size"),
        ({"assets": [{"name": 7, "size": 1}]}, "assets.0.name"),
        ({"assets": [{"name": "a.js", "size": 1, "gzipSize": -5}]}, "assets.0.gzipSize"),
        ({"assets": [], "chunks": [{"modules": [{"name": "m", "size": -2}]}]}, "chunks.0.modules.0.size"),
    ],
)
def test_parse_stats_rejects_malformed_payloads(payload: dict, location: str) -> None:
    with pytest.raises(StatsValidationError, match=re.escape(f"Invalid stats at {location}:")):
        parse_stats(payload)


def test_parse_stats_rejects_duplicate_asset_names() -> None:
    with pytest.raises(StatsValidationError, match="duplicate name 'a.js'"):
        parse_stats(
            {
                "assets": [
                    {"name": "a.js", "size": 1},
                    {"name": "a.js", "size": 2},
                ]
            }
        )


def test_read_stats_file_missing(tmp_path: Path) -> None:
    with pytest.raises(StatsFileError, match="not found"):
        read_stats_file(tmp_path / "missing.json")


def test_read_stats_file_directory_is_not_readable(tmp_path: Path) -> None:
    with pytest.raises(StatsFileError, match="not readable"):
        read_stats_file(tmp_path)


def test_read_stats_file_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(StatsFileError, match="not valid JSON"):
        read_stats_file(path)


def test_read_stats_file_round_trips_through_disk(tmp_path: Path) -> None:
    path = tmp_path / "stats.json"
    path.write_text(
        json.dumps({"assets": [{"name": "a.js", "size": 3, "gzipSize": 1}]}),
        encoding="utf-8",
    )

    stats = read_stats_file(path)

    assert stats.to_dict() == {
        "assets": [{"name": "a.js", "size": 3, "gzip_size": 1}],
        "modules": None,
    }
