from __future__ import annotations

import os
from typing import List

from pydantic import BaseModel


class Settings(BaseModel):
	# Logging
	log_level: str = os.getenv("GOSUMMARIZE_LOG_LEVEL", "WARNING")

	# Discovery: -t default and comma-separated directory names to prune
	exclude_tests: bool = os.getenv("GOSUMMARIZE_EXCLUDE_TESTS", "false").lower() == "true"
	skip_dirs: List[str] = [
		d.strip() for d in os.getenv("GOSUMMARIZE_SKIP_DIRS", "").split(",") if d.strip()
	]

	# HTTP service
	host: str = os.getenv("GOSUMMARIZE_HOST", "127.0.0.1")
	port: int = int(os.getenv("GOSUMMARIZE_PORT", "8000"))


settings = Settings()
