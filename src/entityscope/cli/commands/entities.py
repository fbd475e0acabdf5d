"""`entityscope list|show|export|resolve` subcommands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from prettytable import PrettyTable

from entityscope.api.export import NO_SELECTION_MESSAGE, dump_export
from entityscope.api.filters import FilterCriteria, ObjectKind
from entityscope.api.loader import load_entities
from entityscope.api.resolve import resolve_by_targetname
from entityscope.api.viewer import EntityDetails, EntityViewer, describe
from entityscope.core.config import EntityScopeConfig
from entityscope.core.exceptions import EmptySelectionError


def add_filter_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--class", dest="class_filter", default="", help="Classname substring")
    parser.add_argument("--key", dest="key_filter", default="", help="Property key substring")
    parser.add_argument("--value", dest="value_filter", default="", help="Property value")
    parser.add_argument(
        "--whole-value",
        dest="match_whole_value",
        action="store_true",
        default=None,
        help="Match property values exactly instead of by substring",
    )
    parser.add_argument(
        "--kind",
        choices=[kind.value for kind in ObjectKind],
        default=None,
        help="Restrict to mesh or point entities",
    )


def criteria_from_args(args: argparse.Namespace, config: EntityScopeConfig) -> FilterCriteria:
    """Build filter criteria from CLI flags, falling back to configured defaults."""
    kind = args.kind if args.kind is not None else config.filters.object_kind
    whole = (
        args.match_whole_value
        if args.match_whole_value is not None
        else config.filters.match_whole_value
    )
    return FilterCriteria(
        object_kind=ObjectKind(kind),
        class_filter=args.class_filter,
        key_filter=args.key_filter,
        value_filter=args.value_filter,
        match_whole_value=whole,
    )


def _open_viewer(args: argparse.Namespace) -> EntityViewer:
    entities = load_entities(args.file)
    return EntityViewer(entities, criteria_from_args(args, args.settings))


def _check_index(viewer: EntityViewer, index: int) -> bool:
    if 0 <= index < len(viewer.rows):
        return True
    print(
        f"Error: row {index} is out of range ({len(viewer.rows)} rows match)",
        file=sys.stderr,
    )
    return False


def print_details(details: EntityDetails) -> None:
    print(details.title)
    for key, value in details.properties:
        print(f"  {key} = {value}")
    if details.outputs_visible:
        print("Outputs:")
        for row in details.connections:
            print(
                f"  {row.output} -> {row.target}.{row.input}({row.parameter})"
                f" delay={row.delay:g} times={row.times_to_fire}"
            )


def cmd_list(args: argparse.Namespace) -> int:
    viewer = _open_viewer(args)

    table = PrettyTable()
    table.field_names = ["#", "classname", "targetname"]
    table.align = "l"
    for index, row in enumerate(viewer.rows):
        table.add_row([index, row.classname, row.targetname])

    print(table)
    print(f"{len(viewer.rows)} of {len(viewer.entities)} entities")
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    viewer = _open_viewer(args)

    if args.targetname:
        entity = viewer.follow_reference(args.targetname)
        if entity is None:
            print(f"No entity named '{args.targetname}'", file=sys.stderr)
            return 1
        details = describe(entity)
    else:
        if not _check_index(viewer, args.index):
            return 1
        details = viewer.select(args.index)

    print_details(details)
    return 0


def cmd_export(args: argparse.Namespace) -> int:
    viewer = _open_viewer(args)
    settings = args.settings.export

    indices: List[int] = args.select if args.select is not None else list(range(len(viewer.rows)))
    for index in indices:
        if not _check_index(viewer, index):
            return 1

    try:
        document = viewer.selection_export(indices)
    except EmptySelectionError:
        print(NO_SELECTION_MESSAGE, file=sys.stderr)
        return 1

    output = Path(args.output or settings.default_filename)
    try:
        output.write_text(
            dump_export(document, indent=settings.indent, ensure_ascii=settings.ensure_ascii),
            encoding="utf-8",
        )
    except OSError as e:
        print(f"Error exporting entities: {e}", file=sys.stderr)
        return 1

    print(f"Successfully exported {document['entityCount']} entities to:\n{output}")
    return 0


def cmd_resolve(args: argparse.Namespace) -> int:
    entity = resolve_by_targetname(load_entities(args.file), args.name)
    if entity is None:
        print(f"No entity named '{args.name}'", file=sys.stderr)
        return 1

    print_details(describe(entity))
    return 0
