"""
Unit tests for the visuals module (concepts + image rendering).

Run: pytest tests/unit/test_visuals.py -v
"""

import base64
import json
from types import SimpleNamespace

import pytest

from adapters.gemini.declarations import CONCEPTS_RESPONSE_SCHEMA
from adapters.gemini.prompts import SYSTEM_PROMPT_VISUALS
from conftest import make_images_response, make_text_response
from core.domain.models import AspectRatio, ImageConcept
from core.errors import ConceptGenerationError, ImageGenerationError
from core.services.visuals import (
    JPEG_DATA_URI_PREFIX,
    ImageRenderer,
    VisualConceptGenerator,
    assign_concept_ids,
    render_concept,
)

CONCEPTS_JSON = json.dumps(
    {
        "concepts": [
            {
                "title": "Morning Ritual",
                "conceptDescription": "Flat lay of a latte on oak, soft window light",
                "palette": ["#f4e9dc", "#6b4f3a"],
                "caption": "Start slow. Sip bold.",
                "altText": "A latte on a wooden table",
                "aspectRatio": "4:3",
            },
            {
                "title": "Night Shift",
                "conceptDescription": "Neon-lit espresso bar, long exposure",
                "palette": ["#0b0c2a", "#ff3c8e"],
                "caption": "Open late.",
                "altText": "Espresso bar at night",
                "aspectRatio": "9:16",
            },
        ]
    }
)


class TestVisualConceptGenerator:

    @pytest.fixture
    def generator(self, genai_client, settings):
        return VisualConceptGenerator(genai_client, settings)

    @pytest.mark.asyncio
    async def test_parses_concepts(self, generator, genai_client):
        genai_client.aio.models.generate_content.return_value = make_text_response(CONCEPTS_JSON)

        concepts = await generator.generate("Bean There", "warm", "Launch of our oat latte")

        assert [c.title for c in concepts] == ["Morning Ritual", "Night Shift"]
        assert concepts[0].concept_description.startswith("Flat lay")
        assert concepts[0].alt_text == "A latte on a wooden table"
        assert concepts[1].aspect_ratio is AspectRatio.PORTRAIT
        assert all(c.id is None and c.image_url is None for c in concepts)

    @pytest.mark.asyncio
    async def test_request_uses_structured_output(self, generator, genai_client, settings):
        genai_client.aio.models.generate_content.return_value = make_text_response(CONCEPTS_JSON)

        await generator.generate("Bean There", "warm", "Launch of our oat latte")

        kwargs = genai_client.aio.models.generate_content.await_args.kwargs
        assert kwargs["model"] == settings.visuals_model
        assert kwargs["contents"] == (
            "Brand Name: Bean There\nTone: warm\nContent Brief: Launch of our oat latte"
        )
        config = kwargs["config"]
        assert config.system_instruction == SYSTEM_PROMPT_VISUALS
        assert config.response_mime_type == "application/json"
        assert config.response_schema == CONCEPTS_RESPONSE_SCHEMA

    @pytest.mark.asyncio
    async def test_invalid_json_raises(self, generator, genai_client):
        genai_client.aio.models.generate_content.return_value = make_text_response("Here are concepts: {")

        with pytest.raises(ConceptGenerationError) as exc_info:
            await generator.generate("Bean There", "warm", "brief")

        assert str(exc_info.value) == "Failed to generate image concepts."
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    @pytest.mark.asyncio
    async def test_missing_concepts_key_raises(self, generator, genai_client):
        genai_client.aio.models.generate_content.return_value = make_text_response('{"ideas": []}')

        with pytest.raises(ConceptGenerationError):
            await generator.generate("Bean There", "warm", "brief")

    @pytest.mark.asyncio
    async def test_concepts_not_a_list_raises(self, generator, genai_client):
        genai_client.aio.models.generate_content.return_value = make_text_response('{"concepts": "none"}')

        with pytest.raises(ConceptGenerationError):
            await generator.generate("Bean There", "warm", "brief")

    @pytest.mark.asyncio
    async def test_off_schema_concepts_are_returned_as_parsed(self, generator, genai_client):
        genai_client.aio.models.generate_content.return_value = make_text_response(
            json.dumps(
                {
                    "concepts": [
                        {"title": "Wide", "conceptDescription": "Panorama", "aspectRatio": "21:9"},
                        {"title": 5, "caption": "No ratio given"},
                    ]
                }
            )
        )

        concepts = await generator.generate("Bean There", "warm", "brief")

        assert concepts[0].aspect_ratio == "21:9"
        assert concepts[1].title == 5
        assert concepts[1].aspect_ratio is None
        assert concepts[1].palette is None

    @pytest.mark.asyncio
    async def test_remote_error_raises(self, generator, genai_client):
        genai_client.aio.models.generate_content.side_effect = RuntimeError("quota")

        with pytest.raises(ConceptGenerationError):
            await generator.generate("Bean There", "warm", "brief")

    def test_assign_concept_ids_keeps_existing(self):
        concepts = [ImageConcept(title="a", id="keep"), ImageConcept(title="b")]

        result = assign_concept_ids(concepts)

        assert result[0].id == "keep"
        assert result[1].id
        assert concepts[1].id is None


class TestImageRenderer:

    @pytest.fixture
    def renderer(self, genai_client, settings):
        return ImageRenderer(genai_client, settings)

    @pytest.mark.asyncio
    async def test_returns_jpeg_data_uri(self, renderer, genai_client):
        raw = b"\xff\xd8\xff\xe0fake-jpeg"
        genai_client.aio.models.generate_images.return_value = make_images_response([raw])

        uri = await renderer.render("latte art", AspectRatio.SQUARE)

        assert uri.startswith("data:image/jpeg;base64,")
        assert base64.b64decode(uri[len(JPEG_DATA_URI_PREFIX):]) == raw

    @pytest.mark.asyncio
    async def test_request_asks_for_one_jpeg(self, renderer, genai_client, settings):
        genai_client.aio.models.generate_images.return_value = make_images_response([b"x"])

        await renderer.render("latte art", "16:9")

        kwargs = genai_client.aio.models.generate_images.await_args.kwargs
        assert kwargs["model"] == settings.image_model
        assert kwargs["prompt"] == "latte art"
        assert kwargs["config"].number_of_images == 1
        assert kwargs["config"].aspect_ratio == "16:9"
        assert kwargs["config"].output_mime_type == "image/jpeg"

    @pytest.mark.asyncio
    async def test_no_images_raises(self, renderer, genai_client):
        genai_client.aio.models.generate_images.return_value = make_images_response([])

        with pytest.raises(ImageGenerationError) as exc_info:
            await renderer.render("latte art", AspectRatio.SQUARE)

        assert str(exc_info.value) == "Failed to generate the image."

    @pytest.mark.asyncio
    async def test_filtered_image_raises(self, renderer, genai_client):
        genai_client.aio.models.generate_images.return_value = SimpleNamespace(generated_images=None)

        with pytest.raises(ImageGenerationError):
            await renderer.render("latte art", AspectRatio.SQUARE)

    @pytest.mark.asyncio
    async def test_unknown_aspect_ratio_raises_without_calling(self, renderer, genai_client):
        with pytest.raises(ImageGenerationError):
            await renderer.render("latte art", "2:1")

        genai_client.aio.models.generate_images.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_render_concept_sets_image_url(self, renderer, genai_client):
        genai_client.aio.models.generate_images.return_value = make_images_response([b"jpeg"])
        concept = ImageConcept(
            id="c1",
            title="Night Shift",
            concept_description="Neon-lit espresso bar",
            aspect_ratio=AspectRatio.PORTRAIT,
            is_generating=True,
        )

        rendered = await render_concept(renderer, concept)

        assert rendered.image_url.startswith(JPEG_DATA_URI_PREFIX)
        assert rendered.is_generating is False
        kwargs = genai_client.aio.models.generate_images.await_args.kwargs
        assert kwargs["prompt"] == "Neon-lit espresso bar"
        assert kwargs["config"].aspect_ratio == "9:16"

    @pytest.mark.asyncio
    async def test_render_concept_without_ratio_is_square(self, renderer, genai_client):
        genai_client.aio.models.generate_images.return_value = make_images_response([b"jpeg"])
        concept = ImageConcept(id="c2", concept_description="Oat latte close-up")

        rendered = await render_concept(renderer, concept)

        assert genai_client.aio.models.generate_images.await_args.kwargs["config"].aspect_ratio == "1:1"
        assert rendered.aspect_ratio is None
