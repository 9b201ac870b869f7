import logging
from fastapi import APIRouter, Depends, HTTPException
from json2dart.core.config import settings as app_settings
from json2dart.generators.dart_gen.generator import infer_classes
from json2dart.generators.dart_gen.render import render_dart
from json2dart.generators.dart_gen.types import InvalidJsonError
from json2dart.generators.dart_gen.utils import is_valid_class_name
from json2dart.generators.dart_gen.writer import dart_file_name
from json2dart.schemas.generate import GenerateRequest, GenerateResponse
from json2dart.schemas.settings import GeneratorSettings
from json2dart.services.settings_store import SettingsStore

log = logging.getLogger(__name__)

router = APIRouter()


def get_settings_store() -> SettingsStore:
    return SettingsStore(app_settings.settings_path)


@router.post("/generate", response_model=GenerateResponse)
def generate(req: GenerateRequest, store: SettingsStore = Depends(get_settings_store)):
    if not is_valid_class_name(req.class_name):
        raise HTTPException(status_code=422, detail=f"Invalid Dart class name: {req.class_name!r}")

    gen_settings = req.settings or store.load()
    try:
        classes = infer_classes(req.json_text, req.class_name, gen_settings, max_depth=app_settings.max_depth)
    except InvalidJsonError as e:
        log.warning("Generation failed: %s", e, extra={"class_name": req.class_name})
        raise HTTPException(status_code=400, detail=str(e))

    store.save(gen_settings)
    code = render_dart(classes, req.class_name, gen_settings)
    log.info("Generated %d classes", len(classes),
             extra={"class_name": req.class_name, "strategy": gen_settings.serialization})

    return GenerateResponse(
        code=code,
        file_name=dart_file_name(req.class_name),
        classes=[c.name for c in reversed(classes)],
        settings=gen_settings,
    )


@router.get("/settings", response_model=GeneratorSettings)
def get_settings(store: SettingsStore = Depends(get_settings_store)):
    return store.load()


@router.put("/settings", response_model=GeneratorSettings)
def put_settings(new_settings: GeneratorSettings, store: SettingsStore = Depends(get_settings_store)):
    store.save(new_settings)
    return new_settings
