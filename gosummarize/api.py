from __future__ import annotations

import io
import os

from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from .errors import DiscoveryError
from .model import RunReport
from .summarize import summarize_tree

app = FastAPI(title="Go API Summarizer")


class SummarizeRequest(BaseModel):
	root_path: str
	exclude_tests: bool = False


class SummarizeResult(BaseModel):
	output: str
	report: RunReport


def _run(req: SummarizeRequest) -> SummarizeResult:
	root = os.path.abspath(req.root_path)
	buf = io.StringIO()
	try:
		report = summarize_tree(root, req.exclude_tests, buf)
	except DiscoveryError as e:
		raise HTTPException(status_code=400, detail=f"Invalid root_path: {e}")
	return SummarizeResult(output=buf.getvalue(), report=report)


@app.post("/summarize", response_model=SummarizeResult)
def summarize(req: SummarizeRequest) -> SummarizeResult:
	return _run(req)


@app.post("/summarize/text", response_class=PlainTextResponse)
def summarize_text(req: SummarizeRequest) -> str:
	return _run(req).output


def create_app() -> FastAPI:
	return app
