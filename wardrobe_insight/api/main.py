"""FastAPI entrypoint and HTTP routes."""

from typing import Any

from fastapi import FastAPI
from prometheus_client import make_asgi_app

from wardrobe_insight.api.schemas import (
    AnalyzeRequest,
    ExtractionParseRequest,
    ExtractionParseResponse,
    ExtractionPromptResponse,
)
from wardrobe_insight.catalog.attribute_extractor import AttributeExtractor
from wardrobe_insight.config.settings import get_settings
from wardrobe_insight.metrics.prometheus_exporter import (
    attribute_extraction_total,
    duplicate_analysis_total,
)
from wardrobe_insight.monitoring.logging import configure_logging
from wardrobe_insight.recommender.engine import DuplicateDetectionEngine


def create_app(engine: DuplicateDetectionEngine | None = None) -> FastAPI:
    """Initialise the FastAPI application."""

    settings = get_settings()
    configure_logging()
    engine = engine or DuplicateDetectionEngine()
    extractor = AttributeExtractor(engine.options)

    app = FastAPI(
        title="Wardrobe Insight API",
        version="0.1.0",
        docs_url="/docs" if settings.environment != "prod" else None,
        redoc_url="/redoc" if settings.environment != "prod" else None,
    )
    app.mount("/metrics", make_asgi_app())

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Simple health endpoint used for readiness probes."""

        return {"status": "ok"}

    @app.post("/duplicates/analyze", tags=["duplicates"])
    def analyze_duplicates(request: AnalyzeRequest) -> dict[str, Any]:
        """Score a candidate garment against the supplied wardrobe snapshot."""

        result = engine.analyze(
            request.candidate.to_domain(),
            [item.to_domain() for item in request.existing_items],
        )
        duplicate_analysis_total.labels(action=result.recommendation.action.value).inc()
        return result.to_dict()

    @app.get(
        "/duplicates/extraction-prompt",
        response_model=ExtractionPromptResponse,
        tags=["duplicates"],
    )
    def extraction_prompt(category: str, subcategory: str | None = None) -> ExtractionPromptResponse:
        """Return the instruction text sent alongside a garment photo."""

        return ExtractionPromptResponse(prompt=extractor.generate_prompt(category, subcategory))

    @app.post(
        "/duplicates/extraction/parse",
        response_model=ExtractionParseResponse,
        tags=["duplicates"],
    )
    def parse_extraction(request: ExtractionParseRequest) -> ExtractionParseResponse:
        """Validate a raw model answer against the wardrobe vocabularies."""

        attributes = extractor.parse_response(request.text, request.category)
        attribute_extraction_total.labels(
            outcome="resolved" if attributes else "rejected",
        ).inc()
        return ExtractionParseResponse(attributes=attributes.to_dict() if attributes else None)

    return app


app = create_app()
