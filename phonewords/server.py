import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from phonewords.dictionary import Dictionary
from phonewords.settings import configure_logging, settings

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("phonewords")

# Populated at startup unless a dictionary is injected
_dictionary = None


def _require_dictionary() -> Dictionary:
    if _dictionary is None:
        raise HTTPException(503, "Dictionary not loaded")
    return _dictionary


def _check_digits(digits: str):
    from phonewords.keypad import InvalidDigitsError, validate_digits
    from phonewords.solver import count_letter_strings

    try:
        validate_digits(digits)
    except InvalidDigitsError as e:
        raise HTTPException(400, str(e))
    if len(digits) > settings.MAX_DIGITS:
        raise HTTPException(413, f"Number too long ({len(digits)} digits, max {settings.MAX_DIGITS})")
    combinations = count_letter_strings(digits)
    if combinations > settings.MAX_LETTER_STRINGS:
        raise HTTPException(413, f"Number spells too many letter strings ({combinations}, max {settings.MAX_LETTER_STRINGS})")


def create_app(dictionary: Dictionary | None = None) -> FastAPI:
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        global _dictionary

        configure_logging(settings)
        if dictionary is not None:
            _dictionary = dictionary
            logger.info("Using injected dictionary (%d words)", len(dictionary))
        else:
            from phonewords.dictionary import load_dictionary
            logger.info("Loading dictionary from %s", settings.DICTIONARY_PATH)
            _dictionary = load_dictionary(settings.DICTIONARY_PATH)

        yield

        _dictionary = None

    application = FastAPI(title="Phone Words", lifespan=lifespan)

    @application.get("/health")
    async def health():
        return {
            "status": "ok",
            "dictionary_loaded": _dictionary is not None,
            "dictionary_size": len(_dictionary) if _dictionary is not None else 0,
        }

    @application.get("/decode/{digits}")
    async def decode(digits: str, strategy: str | None = None):
        from phonewords.metrics import StageTimer
        from phonewords.solver import STRATEGIES, solve

        words = _require_dictionary()
        _check_digits(digits)
        strategy = strategy or settings.DEFAULT_STRATEGY
        if strategy not in STRATEGIES:
            raise HTTPException(400, f"Unknown strategy {strategy!r}, expected one of {sorted(STRATEGIES)}")

        timer = StageTimer()
        with timer.stage(strategy):
            result = solve(digits, words, strategy)

        logger.info("Decoded %s with %s: %d keys, %d probes", digits, strategy, len(result.results), result.probes)

        return JSONResponse({
            "digits": digits,
            "strategy": strategy,
            "probes": result.probes,
            "key_count": len(result.results),
            "results": result.results.as_dict(),
            "processing_time": timer.total_ms,
        })

    @application.get("/compare/{digits}")
    async def compare(digits: str, canonical: bool | None = None):
        from phonewords.compare import compare_results
        from phonewords.metrics import StageTimer
        from phonewords.solver import find_all_split, find_all_walk

        words = _require_dictionary()
        _check_digits(digits)
        if canonical is None:
            canonical = settings.CANONICAL_COMPARE

        timer = StageTimer()
        with timer.stage("split"):
            split_result = find_all_split(digits, words)
        with timer.stage("walk"):
            walk_result = find_all_walk(digits, words)
        with timer.stage("compare"):
            report = compare_results(split_result.results, walk_result.results, canonical=canonical)

        return JSONResponse({
            "digits": digits,
            "probes": {"split": split_result.probes, "walk": walk_result.probes},
            "report": report.to_dict(),
            "stage_timings": timer.summary(),
        })

    @application.get("/api/settings")
    async def api_get_settings():
        from phonewords.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from phonewords.settings import update_settings, get_editable_settings
        body = await request.json()
        errors = update_settings(settings, **body)
        configure_logging(settings)
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


app = create_app()
