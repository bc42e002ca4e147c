"""Tests for the OpenAPI export script."""

import json

from scripts.generate_openapi import generate_openapi, main


class TestGenerateOpenapi:
    def test_contains_coupon_paths(self):
        schema = generate_openapi()
        assert schema["info"]["title"] == "Coupon API"
        assert set(schema["paths"]["/api/coupon"]) == {"get", "post", "put"}
        assert set(schema["paths"]["/api/coupon/{coupon_id}"]) == {"get", "delete"}

    def test_writes_to_file(self, tmp_path):
        target = tmp_path / "openapi.json"
        assert main([str(target)]) == 0
        document = json.loads(target.read_text(encoding="utf-8"))
        assert "/api/coupon" in document["paths"]

    def test_prints_to_stdout(self, capsys):
        assert main([]) == 0
        document = json.loads(capsys.readouterr().out)
        assert document["openapi"].startswith("3.")
