import logging
import os

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from fastapi.middleware.cors import CORSMiddleware
from typing import List, Tuple, Optional

from algorithms.kmp import kmp_build_lps, kmp_find_all

logger = logging.getLogger(__name__)

MAX_TEXT = int(os.getenv("KMP_API_MAX_TEXT", "1000000"))

app = FastAPI(title="KMP Search API", version="1.0")

# CORS for demos; restrict origins in production
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

class SearchRequest(BaseModel):
    text: Optional[str] = None
    pattern: Optional[str] = None

class SearchResponse(BaseModel):
    count: int
    matches: List[Tuple[int, int]]  # (start, len)
    lps: List[int]

class LpsRequest(BaseModel):
    pattern: str

class LpsResponse(BaseModel):
    pattern: str
    lps: List[int]

def check_size(name: str, value: Optional[str]):
    if value is not None and len(value) > MAX_TEXT:
        raise HTTPException(status_code=413, detail=f"{name} longer than {MAX_TEXT} characters")

@app.get("/health")
def health():
    return {"ok": True}

@app.post("/api/search", response_model=SearchResponse)
def search(req: SearchRequest):
    check_size("text", req.text)
    check_size("pattern", req.pattern)

    # a missing text or pattern is an empty result, not an error
    if req.text is None or req.pattern is None:
        return SearchResponse(count=0, matches=[], lps=[])

    lps = kmp_build_lps(req.pattern)
    hits = kmp_find_all(req.text, req.pattern, lps)
    logger.debug("search n=%d m=%d hits=%d", len(req.text), len(req.pattern), len(hits))
    m = len(req.pattern)
    return SearchResponse(count=len(hits), matches=[(i, m) for i in hits], lps=lps)

@app.post("/api/lps", response_model=LpsResponse)
def lps(req: LpsRequest):
    check_size("pattern", req.pattern)
    return LpsResponse(pattern=req.pattern, lps=kmp_build_lps(req.pattern))

# Run with: uvicorn api.main:app --host 0.0.0.0 --port 8000
