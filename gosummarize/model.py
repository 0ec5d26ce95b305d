from __future__ import annotations

from typing import List, Literal, Optional, Union

from pydantic import BaseModel


class Param(BaseModel):
	names: List[str] = []
	type: str


class Signature(BaseModel):
	type_params: str = ""
	params: List[Param] = []
	results: List[Param] = []


class Receiver(BaseModel):
	name: Optional[str] = None
	type: str


class FuncDecl(BaseModel):
	kind: Literal["func"] = "func"
	name: str
	doc: str = ""
	line: int = 0
	signature: Signature
	receiver: Optional[Receiver] = None


class FieldInfo(BaseModel):
	names: List[str] = []
	type: str
	doc: str = ""


class TypeDecl(BaseModel):
	kind: Literal["type"] = "type"
	name: str
	doc: str = ""
	line: int = 0
	type_params: str = ""
	alias: bool = False
	definition: str
	fields: Optional[List[FieldInfo]] = None


class ValueDecl(BaseModel):
	kind: Literal["const", "var"]
	names: List[str]
	type: Optional[str] = None
	values: List[str] = []
	doc: str = ""
	line: int = 0


Declaration = Union[FuncDecl, TypeDecl, ValueDecl]


class GoFile(BaseModel):
	path: str
	package: str
	declarations: List[Declaration] = []


class FileError(BaseModel):
	path: str
	error: str


class RunReport(BaseModel):
	files: List[str] = []
	summarized: List[str] = []
	errors: List[FileError] = []
