"""
Unit tests for the JSON and data-URI exporters.

Run: pytest tests/unit/test_exporters.py -v
"""

import json

import pytest

from adapters.image_exporter import decode_data_uri, write_data_uri
from adapters.json_exporter import export_json
from core.domain.models import AspectRatio, CommandError, ImageConcept, PostBrief


class TestJsonExporter:

    def test_concepts_use_camel_case_aliases(self, tmp_path):
        concept = ImageConcept(
            id="c1",
            title="Morning",
            concept_description="latte",
            alt_text="a latte",
            aspect_ratio=AspectRatio.LANDSCAPE,
        )

        path = export_json(payload=[concept], output_path=tmp_path / "out" / "concepts.json")
        data = json.loads(path.read_text(encoding="utf-8"))

        assert data[0]["conceptDescription"] == "latte"
        assert data[0]["altText"] == "a latte"
        assert data[0]["aspectRatio"] == "16:9"
        assert "imageUrl" not in data[0]

    def test_unvalidated_concept_is_written_as_received(self, tmp_path):
        concept = ImageConcept.from_response({"title": 5, "aspectRatio": "21:9", "mood": "calm"})

        data = json.loads(export_json(payload=[concept], output_path=tmp_path / "c.json").read_text())

        assert data == [{"aspectRatio": "21:9", "mood": "calm", "title": 5}]

    def test_briefs_and_errors(self, tmp_path):
        briefs = [PostBrief(topic="AI", content="x", hashtags=["#AI"])]

        data = json.loads(export_json(payload=briefs, output_path=tmp_path / "b.json").read_text())
        error = json.loads(
            export_json(payload=CommandError(error="nope"), output_path=tmp_path / "e.json").read_text()
        )

        assert data == [{"content": "x", "hashtags": ["#AI"], "topic": "AI"}]
        assert error == {"error": "nope"}


class TestImageExporter:

    def test_roundtrip_to_file(self, tmp_path):
        path = write_data_uri(uri="data:image/jpeg;base64,/9j/AA==", output_path=tmp_path / "img.jpg")

        assert path.read_bytes() == b"\xff\xd8\xff\x00"
        assert decode_data_uri("data:image/jpeg;base64,/9j/AA==")[0] == "image/jpeg"

    @pytest.mark.parametrize("uri", ["", "image/jpeg;base64,AAAA", "data:image/jpeg;base64,***"])
    def test_rejects_invalid_uris(self, uri):
        with pytest.raises(ValueError):
            decode_data_uri(uri)
