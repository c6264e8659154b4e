"""Tests for adapters.json_exporter."""

import json

from adapters.json_exporter import code_to_feature, codes_to_geojson, export_codes


class TestGeoJson:
    """Tests for GeoJSON conversion."""

    def test_feature_ring_is_closed(self, delhi_cell):
        feature = code_to_feature(delhi_cell)
        ring = feature["geometry"]["coordinates"][0]
        assert feature["geometry"]["type"] == "Polygon"
        assert len(ring) == 5
        assert ring[0] == ring[-1]

    def test_feature_uses_lon_lat(self, delhi_cell):
        sw = code_to_feature(delhi_cell)["geometry"]["coordinates"][0][0]
        assert sw == [delhi_cell.bounding_box.southwest.longitude, delhi_cell.bounding_box.southwest.latitude]

    def test_properties(self, delhi_cell):
        properties = code_to_feature(delhi_cell)["properties"]
        assert properties["code"] == delhi_cell.code
        assert properties["formatted"] == delhi_cell.formatted

    def test_collection(self, delhi_cell):
        collection = codes_to_geojson([delhi_cell, delhi_cell])
        assert collection["type"] == "FeatureCollection"
        assert len(collection["features"]) == 2


class TestExportCodes:
    """Tests for export_codes."""

    def test_json(self, tmp_path, delhi_cell):
        path = export_codes(cells=[delhi_cell], output_path=tmp_path / "out" / "cells.json")
        data = json.loads(path.read_text(encoding="utf-8"))
        assert isinstance(data, list)
        assert data[0]["code"] == delhi_cell.code
        assert data[0]["center"]["latitude"] == delhi_cell.center.latitude

    def test_geojson_by_suffix(self, tmp_path, delhi_cell):
        path = export_codes(cells=[delhi_cell], output_path=tmp_path / "cells.geojson")
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["type"] == "FeatureCollection"


class TestSeparator:
    """Tests for the separator used in exported properties."""

    def test_feature_custom_separator(self, delhi_cell):
        properties = code_to_feature(delhi_cell, ".")["properties"]
        assert properties["formatted"] == delhi_cell.format(".")

    def test_geojson_export_custom_separator(self, tmp_path, delhi_cell):
        path = export_codes(cells=[delhi_cell], output_path=tmp_path / "cells.geojson", separator=".")
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["features"][0]["properties"]["formatted"].count(".") == 2
