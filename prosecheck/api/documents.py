"""Documents API — validate plain text with the bundled per-language rule sets."""

import structlog
from fastapi import APIRouter

from prosecheck.config import DEFAULT_VALIDATORS, get_settings
from prosecheck.models.requests import ValidateDocumentRequest
from prosecheck.models.responses import FindingResponse, ValidateDocumentResponse, ValidatorInfo
from prosecheck.parsers.plain_text import PlainTextParser
from prosecheck.services.engine_cache import engine_cache
from prosecheck.validators import VALIDATOR_CATALOG

logger = structlog.get_logger()

router = APIRouter()


def _resolve_lang(lang: str) -> str:
    """Map a requested language onto one with a bundled rule set."""
    lang = (lang or "").strip().lower()
    return lang if lang in DEFAULT_VALIDATORS else get_settings().DEFAULT_LANG


@router.post("/document/validate", response_model=ValidateDocumentResponse)
def validate_document(request: ValidateDocumentRequest):
    """Parse the text, run the language's engine and return the findings in order."""
    lang = _resolve_lang(request.lang)
    engine = engine_cache.get_or_create(lang)

    parser = PlainTextParser(engine.registry.symbol_table)
    collection = parser.parse(request.document, file_name=request.file_name).build()
    findings = engine.check(collection)

    logger.info("document_validated", lang=lang, chars=len(request.document), findings=len(findings))

    return ValidateDocumentResponse(
        document=request.document,
        lang=lang,
        errors=[FindingResponse.from_finding(f) for f in findings],
    )


@router.get("/validators", response_model=list[ValidatorInfo])
async def list_validators():
    """List every registered validator identifier."""
    return [
        ValidatorInfo(
            name=spec.name,
            granularity=str(getattr(spec.granularity, "value", spec.granularity)),
            preprocessor=spec.preprocessor,
        )
        for spec in sorted(VALIDATOR_CATALOG.values(), key=lambda s: s.name)
    ]
