from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

import pandas as pd

from rdfmeta.config import ENV_DIRS, directories_from_env
from rdfmeta.driver import RdfDriverXml, class_name_to_filename
from rdfmeta.entity import TypeDescriptor
from rdfmeta.export_jsonld import to_jsonld_context


def fields_to_df(type_: TypeDescriptor) -> pd.DataFrame:
    cols = ["identifier", "kind", "term", "tag_name", "attributes", "config"]
    rows = []
    for child in type_:
        rows.append([
            child.identifier,
            child.kind.value,
            child.term or "",
            child.tag_name or "",
            json.dumps(child.attributes, ensure_ascii=False, sort_keys=True),
            json.dumps(child.config, ensure_ascii=False, sort_keys=True),
        ])
    return pd.DataFrame(rows, columns=cols)


def _resolve_dirs(dir_args: List[str]) -> List[str]:
    dirs = dir_args or directories_from_env()
    if not dirs:
        raise SystemExit(f"No metadata directories. Pass --dir or set {ENV_DIRS}.")
    return dirs


def _load(class_name: str, dirs: List[str]) -> TypeDescriptor:
    type_ = RdfDriverXml(dirs).load_type_for_class(class_name)
    if type_ is None:
        raise SystemExit(
            f"No metadata for {class_name} ({class_name_to_filename(class_name)}) in:\n"
            + "\n".join(f"  - {d}" for d in dirs)
        )
    return type_


def cmd_describe(args: argparse.Namespace) -> int:
    dirs = _resolve_dirs(args.dir)
    type_ = _load(args.class_name, dirs)

    print(f"[describe] {args.class_name}: typeof={type_.rdf_type or '-'}", file=sys.stderr)
    for prefix, uri in type_.vocabularies.items():
        print(f"  xmlns:{prefix or '(default)'} = {uri}", file=sys.stderr)
    for k, v in type_.config.items():
        print(f"  config {k} = {v}", file=sys.stderr)

    df = fields_to_df(type_)
    if args.out:
        out_csv = Path(args.out)
        out_csv.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(out_csv, index=False, encoding="utf-8")
        print(f"[ok] wrote: {out_csv}", file=sys.stderr)

    print(f"[ok] fields={len(df)}", file=sys.stderr)
    if not df.empty:
        print(df.to_string(index=False))
    return 0


def cmd_context(args: argparse.Namespace) -> int:
    dirs = _resolve_dirs(args.dir)
    type_ = _load(args.class_name, dirs)
    print(json.dumps(to_jsonld_context(type_), ensure_ascii=False, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Inspect RDFa XML metadata for entity classes.")
    sub = ap.add_subparsers(dest="command", required=True)

    for name, fn, help_ in (
        ("describe", cmd_describe, "List the fields of a mapped class (optionally as CSV)."),
        ("context", cmd_context, "Print a JSON-LD @context for a mapped class."),
    ):
        p = sub.add_parser(name, help=help_)
        p.add_argument("class_name", help="Class name, e.g. 'Blog\\Post' or blog.models.Post")
        p.add_argument(
            "--dir",
            action="append",
            default=[],
            help=f"Metadata directory. Repeatable, first match wins. Defaults to ${ENV_DIRS}.",
        )
        if name == "describe":
            p.add_argument("--out", default=None, help="Optional CSV output path.")
        p.set_defaults(func=fn)

    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
