import logging
import os

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from name_parser.entity_types.name_record import NameRecord, sort_names
from name_parser.parser.name_parser import EmptyNameError, parse
from name_parser.parser.parser_configuration import DEFAULT_CONFIGURATION
from name_parser.utils.logging import configure_logging

configure_logging(os.environ.get("NAME_PARSER_LOG_LEVEL", "INFO"))
logger = logging.getLogger(__name__)

app = FastAPI(title="Name‑Parser API", version="0.1.0")

# --- Configuration -------------------------------------------------------------
CONFIG = DEFAULT_CONFIGURATION

# --- Pydantic DTOs -------------------------------------------------------------
class ParseRequest(BaseModel):
    full_name: str = Field(..., min_length=1, description="Free-form full name")

class BatchParseRequest(BaseModel):
    full_names: list[str] = Field(..., description="Full names to parse")
    sort: bool = False  # order by last, first, middle initials

class NameRecordResponse(BaseModel):
    salutation: str
    first_name: str
    middle_initials: str
    last_name: str
    suffix: str
    full_name: str

class BatchParseResponse(BaseModel):
    records: list[NameRecordResponse]

class ConfigurationResponse(BaseModel):
    salutations: dict[str, str]
    suffixes: list[str]
    compound_last_name_markers: list[str]


def to_response(record: NameRecord) -> NameRecordResponse:
    return NameRecordResponse(**record.to_dict(), full_name=record.full_name)


def parse_or_422(full_name: str) -> NameRecord:
    try:
        return parse(full_name, CONFIG)
    except EmptyNameError as e:
        logger.info("rejected name %r", e.full_name)
        raise HTTPException(status_code=422, detail=str(e))

# --- Routes --------------------------------------------------------------------
@app.post("/parse", response_model=NameRecordResponse)
def parse_name(dto: ParseRequest):
    return to_response(parse_or_422(dto.full_name))


@app.post("/parse/batch", response_model=BatchParseResponse)
def parse_names(dto: BatchParseRequest):
    records = [parse_or_422(full_name) for full_name in dto.full_names]
    if dto.sort:
        records = sort_names(records)
    return {"records": [to_response(r) for r in records]}


@app.get("/configuration", response_model=ConfigurationResponse)
def configuration():
    return {
        "salutations": dict(CONFIG.salutations),
        "suffixes": sorted(CONFIG.suffixes),
        "compound_last_name_markers": sorted(CONFIG.compound_last_name_markers),
    }

# To run:
#   uvicorn name_parser.app:app --reload
