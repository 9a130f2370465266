"""Tests for the YAML loaders — tiles, maps and the bundled config."""

from pathlib import Path

import pytest

from hexlogic.engine.tile_catalog import TileCatalog, default_catalog
from hexlogic.loaders.map_loader import load_hex_map
from hexlogic.loaders.tile_loader import load_tile_catalog
from hexlogic.util.errors import CatalogLoadError, MapConfigError, TileNotFoundError

# Path to the real config directory
CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"

TILES_YAML = (
    "tiles:\n"
    "  grass:\n"
    "    name: Grass\n"
    "  water:\n"
    "    name: Water\n"
    "    cost: 10\n"
    "    height: 0\n"
)


class TestBundledConfig:
    def test_config_files_exist(self):
        for rel in ("grid.yaml", "tiles.yaml", "maps/default.yaml"):
            assert (CONFIG_DIR / rel).exists(), f"Missing config file: {rel}"

    def test_load_tiles(self):
        catalog = load_tile_catalog(CONFIG_DIR / "tiles.yaml", TileCatalog())
        assert len(catalog) >= 6
        assert catalog.lookup("forest").cost == pytest.approx(2.0)
        assert catalog.lookup("grass").cost == pytest.approx(1.0)

    def test_load_default_map(self):
        catalog = load_tile_catalog(CONFIG_DIR / "tiles.yaml", TileCatalog())
        m = load_hex_map(CONFIG_DIR / "maps" / "default.yaml", catalog, strict=True)
        assert m.size == (6, 4)
        assert m.tile_at(0, 0).id == "grass"
        assert m.tile_at(5, 0).id == "mountain"
        assert m.tile_at(1, 2).id == "water"
        assert m.tile_at(0, 3).id == "water"

    def test_every_map_tile_is_known(self):
        catalog = load_tile_catalog(CONFIG_DIR / "tiles.yaml", TileCatalog())
        m = load_hex_map(CONFIG_DIR / "maps" / "default.yaml", catalog)
        assert all(t.id in catalog for t in m.tiles)


class TestTileLoader:
    def test_load_from_file(self, tmp_path):
        f = tmp_path / "tiles.yaml"
        f.write_text(TILES_YAML)
        catalog = load_tile_catalog(f, TileCatalog())
        assert sorted(catalog.ids()) == ["grass", "water"]
        assert catalog.lookup("water").height == pytest.approx(0.0)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_tile_catalog(tmp_path / "nonexistent.yaml", TileCatalog())

    def test_empty_file(self, tmp_path):
        f = tmp_path / "tiles.yaml"
        f.write_text("")
        assert len(load_tile_catalog(f, TileCatalog())) == 0

    def test_top_level_list(self, tmp_path):
        f = tmp_path / "tiles.yaml"
        f.write_text("- grass\n- water\n")
        with pytest.raises(CatalogLoadError):
            load_tile_catalog(f, TileCatalog())

    def test_default_catalog_used(self, tmp_path):
        f = tmp_path / "tiles.yaml"
        f.write_text(TILES_YAML)
        try:
            assert load_tile_catalog(f) is default_catalog()
            assert "grass" in default_catalog()
        finally:
            default_catalog().clear()


class TestMapLoader:
    @pytest.fixture
    def catalog(self, tmp_path) -> TileCatalog:
        f = tmp_path / "tiles.yaml"
        f.write_text(TILES_YAML)
        return load_tile_catalog(f, TileCatalog())

    def test_load_map(self, tmp_path, catalog):
        f = tmp_path / "map.yaml"
        f.write_text("width: 2\ntiles: [grass, water, water, grass]\n")
        m = load_hex_map(f, catalog)
        assert m.size == (2, 2)
        assert m.tile_at(1, 0).id == "water"

    def test_origin(self, tmp_path, catalog):
        f = tmp_path / "map.yaml"
        f.write_text("x: 4\ny: -2\nwidth: 1\ntiles: [grass]\n")
        m = load_hex_map(f, catalog)
        assert (m.x, m.y) == (4, -2)
        assert m.tile_at(4, -2) is m.tiles[0]

    def test_unknown_tile(self, tmp_path, catalog):
        f = tmp_path / "map.yaml"
        f.write_text("width: 1\ntiles: [lava]\n")
        with pytest.raises(TileNotFoundError):
            load_hex_map(f, catalog)

    def test_strict(self, tmp_path, catalog):
        f = tmp_path / "map.yaml"
        f.write_text("width: 2\ntiles: [grass, grass, grass]\n")
        assert load_hex_map(f, catalog).height == 1
        with pytest.raises(MapConfigError):
            load_hex_map(f, catalog, strict=True)

    def test_empty_file(self, tmp_path, catalog):
        f = tmp_path / "map.yaml"
        f.write_text("")
        with pytest.raises(MapConfigError):
            load_hex_map(f, catalog)

    def test_top_level_list(self, tmp_path, catalog):
        f = tmp_path / "map.yaml"
        f.write_text("- grass\n- water\n")
        with pytest.raises(MapConfigError):
            load_hex_map(f, catalog)
