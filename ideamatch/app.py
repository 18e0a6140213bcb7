import argparse
import json
import os
from pathlib import Path
from typing import List

from .env import load_env, db_path_from_env

from . import __version__
from .catalog import IDEA_CATALOG, available_ideas, get_idea
from .checklist import get_validation_items, initialize_default_checklist, set_item_completed
from .database import init_database, get_session
from .errors import ProfileNotFoundError, ProfileValidationError, UnknownIdeaError
from .logger import get_logger
from .matcher import annotate_idea, compare_ideas, pick_best_idea
from .models import CATEGORY_LABELS, BusinessIdea, FounderProfile, MatchBreakdown
from .questionnaire import answers_to_profile
from .schema import profile_from_dict, validate_profile, validate_profile_strict
from .scoring import breakdown
from .storage import (
    add_note,
    add_to_collection,
    commit_to_idea,
    create_collection,
    dismiss_idea,
    exit_decision_mode,
    get_collections,
    get_decision_mode,
    get_dismissed_idea_ids,
    get_notes,
    get_saved_ideas,
    load_founder_profile,
    save_founder_profile,
    save_idea,
)
from .summary import summarize

logger = get_logger()


def _split_ids(raw: str) -> List[str]:
    return [s.strip() for s in raw.split(",") if s.strip()] if raw else []


def _read_json(path_str: str) -> dict:
    input_path = Path(path_str)
    if not input_path.exists():
        raise SystemExit(f"Input file not found: {input_path}")
    with input_path.open("r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            logger.record_error(type(e).__name__)
            print(f"Invalid JSON in {input_path}: {e}")
            raise SystemExit(2)


def _load_profile_file(path_str: str) -> FounderProfile:
    try:
        return profile_from_dict(_read_json(path_str))
    except ProfileValidationError as e:
        logger.record_validation_failure()
        print("Invalid profile:")
        for err in e.errors:
            print(f" - {err}")
        raise SystemExit(2)


def _db_session(args: argparse.Namespace):
    db_path = Path(args.db) if args.db else db_path_from_env()
    init_database(db_path)
    return get_session(db_path)


def _catalog_idea(idea_id: str):
    try:
        return get_idea(idea_id)
    except UnknownIdeaError as e:
        logger.record_error(type(e).__name__)
        raise SystemExit(str(e))


def _profile_missing(e: ProfileNotFoundError) -> SystemExit:
    logger.record_error(type(e).__name__)
    return SystemExit(f"{e}. Run 'onboard' first.")


def _load_user_profile(session, user_id: str):
    try:
        return load_founder_profile(session, user_id)
    except ProfileNotFoundError as e:
        raise _profile_missing(e)


def _print_idea(idea: BusinessIdea) -> None:
    print(f"{idea.title} ({idea.id}) - {idea.match_score}% match")
    print(f"  {idea.tagline}")
    print(f"  Why you: {idea.why_you}")
    print(f"  Capital: {idea.capital_needed} | First revenue: {idea.time_to_first_revenue}")
    print(f"  Risk: {idea.risk_level} | Complexity: {idea.execution_complexity}")


def _print_breakdown(result: MatchBreakdown) -> None:
    print(f"Total score: {result.total_score} (raw {result.raw_score})")
    for factor in result.factors:
        sign = "+" if factor.points > 0 else ""
        category = CATEGORY_LABELS[factor.category]
        print(f" [{factor.impact:<8}] {sign}{factor.points:>3}  {category} / {factor.label}: {factor.description}")
        print(f"             you: {factor.profile_value} | idea: {factor.idea_value}")


def _report_match(profile, summary, excluded) -> None:
    logger.record_ideas_scored(len(available_ideas(excluded)))
    idea = pick_best_idea(profile, summary, excluded)
    if idea is None:
        logger.record_catalog_exhausted()
        print("No more ideas: every idea in the catalog has been dismissed.")
        return
    logger.record_match()
    _print_idea(idea)


def cmd_validate(args: argparse.Namespace) -> None:
    data = _read_json(args.input)
    if args.strict:
        _, errors = validate_profile_strict(data)
    else:
        errors = validate_profile(data)
    if errors:
        logger.record_validation_failure()
        print("Invalid:")
        for e in errors:
            print(f" - {e}")
        raise SystemExit(2)
    print("Valid")


def cmd_summarize(args: argparse.Namespace) -> None:
    profile = _load_profile_file(args.input)
    print(json.dumps(summarize(profile).to_dict(), indent=2))


def cmd_match(args: argparse.Namespace) -> None:
    profile = _load_profile_file(args.input)
    _report_match(profile, summarize(profile), _split_ids(args.exclude))


def cmd_breakdown(args: argparse.Namespace) -> None:
    profile = _load_profile_file(args.input)
    idea = _catalog_idea(args.idea)
    logger.record_breakdown()
    print(f"{idea.title} ({idea.id})")
    _print_breakdown(breakdown(profile, idea))


def cmd_compare(args: argparse.Namespace) -> None:
    profile = _load_profile_file(args.input)
    try:
        results = compare_ideas(profile, _split_ids(args.ideas))
    except (UnknownIdeaError, ValueError) as e:
        logger.record_error(type(e).__name__)
        raise SystemExit(str(e))
    for idea, result in results:
        logger.record_breakdown()
        print(f"\n== {idea.title} ({idea.id})")
        _print_breakdown(result)


def cmd_catalog(args: argparse.Namespace) -> None:
    print(f"{len(IDEA_CATALOG)} ideas in catalog:\n")
    for idea in IDEA_CATALOG:
        print(f"ID: {idea.id}")
        print(f"  Title: {idea.title}")
        print(f"  Category: {idea.category}")
        print(f"  Capital: {idea.capital_needed}")
        print()


def cmd_onboard(args: argparse.Namespace) -> None:
    profile = answers_to_profile(_read_json(args.answers))
    summary = summarize(profile)
    session = _db_session(args)
    try:
        outcome = save_founder_profile(session, args.user, profile, summary)
        print(f"Profile: {args.user} ({outcome['status']})")
        print(f"Founder type: {summary.founder_type}")
        print(f"Weekly capacity: {summary.weekly_capacity_score}/10")
        print()
        _report_match(profile, summary, get_dismissed_idea_ids(session, args.user))
    finally:
        session.close()


def cmd_next(args: argparse.Namespace) -> None:
    session = _db_session(args)
    try:
        profile, summary = _load_user_profile(session, args.user)
        _report_match(profile, summary, get_dismissed_idea_ids(session, args.user))
    finally:
        session.close()


def cmd_save(args: argparse.Namespace) -> None:
    idea = _catalog_idea(args.idea)
    session = _db_session(args)
    try:
        profile, _ = _load_user_profile(session, args.user)
        outcome = save_idea(session, args.user, annotate_idea(profile, idea))
        if outcome["status"] == "new":
            initialize_default_checklist(session, args.user, idea.id)
        print(f"[{outcome['status']}] {idea.id}")
    finally:
        session.close()


def cmd_dismiss(args: argparse.Namespace) -> None:
    idea = _catalog_idea(args.idea)
    session = _db_session(args)
    try:
        outcome = dismiss_idea(session, args.user, idea.id)
        print(f"[{outcome['status']}] dismissed {idea.id}")
    finally:
        session.close()


def cmd_saved(args: argparse.Namespace) -> None:
    session = _db_session(args)
    try:
        ideas = get_saved_ideas(session, args.user)
        if not ideas:
            print("No saved ideas.")
            return
        print(f"Found {len(ideas)} saved ideas:\n")
        for idea in ideas:
            _print_idea(idea)
            for note in get_notes(session, args.user, idea.id):
                print(f"  Note: {note.content}")
            print()
        collections = get_collections(session, args.user)
        if collections:
            print("Collections: " + ", ".join(c.name for c in collections))
    finally:
        session.close()


def cmd_note(args: argparse.Namespace) -> None:
    idea = _catalog_idea(args.idea)
    session = _db_session(args)
    try:
        note = add_note(session, args.user, idea.id, args.text)
        print(f"Note {note.id} added to {idea.id}")
    finally:
        session.close()


def cmd_collect(args: argparse.Namespace) -> None:
    idea = _catalog_idea(args.idea)
    session = _db_session(args)
    try:
        collection = next((c for c in get_collections(session, args.user) if c.name == args.name), None)
        if collection is None:
            collection = create_collection(session, args.user, args.name)
        outcome = add_to_collection(session, args.user, collection.id, idea.id)
        print(f"[{outcome['status']}] {idea.id} -> {collection.name}")
    finally:
        session.close()


def cmd_checklist(args: argparse.Namespace) -> None:
    idea = _catalog_idea(args.idea)
    session = _db_session(args)
    try:
        for item_id in _split_ids(args.done):
            if set_item_completed(session, args.user, idea.id, item_id, True) is None:
                print(f"[warn] unknown checklist item: {item_id}")
        items = get_validation_items(session, args.user, idea.id)
        if not items:
            initialize_default_checklist(session, args.user, idea.id)
            items = get_validation_items(session, args.user, idea.id)
        done = sum(1 for item in items if item.is_completed)
        print(f"{idea.title}: {done}/{len(items)} validated")
        for item in items:
            mark = "x" if item.is_completed else " "
            print(f" [{mark}] {item.category:<9} {item.label} ({item.id})")
    finally:
        session.close()


def cmd_commit(args: argparse.Namespace) -> None:
    idea = _catalog_idea(args.idea)
    session = _db_session(args)
    try:
        commit_to_idea(session, args.user, idea.id)
        print(f"Decision mode active: focused on {idea.title}")
    except ProfileNotFoundError as e:
        raise _profile_missing(e)
    finally:
        session.close()


def cmd_exit_decision(args: argparse.Namespace) -> None:
    session = _db_session(args)
    try:
        exit_decision_mode(session, args.user, reason=args.reason)
        print("Decision mode off")
    except ProfileNotFoundError as e:
        raise _profile_missing(e)
    finally:
        session.close()


def cmd_status(args: argparse.Namespace) -> None:
    session = _db_session(args)
    try:
        active, idea_id = get_decision_mode(session, args.user)
        if active:
            print(f"Decision mode: active ({idea_id})")
        else:
            print("Decision mode: off")
    finally:
        session.close()


def main(argv=None):
    # Load .env if present (IDEAMATCH_DB, IDEAMATCH_LOG_LEVEL, etc.)
    load_env()
    logger.set_level(os.getenv("IDEAMATCH_LOG_LEVEL", "INFO"))

    parser = argparse.ArgumentParser(prog="ideamatch", description="Match founders to business ideas")
    parser.add_argument("--version", action="store_true", help="Show version")
    parser.add_argument("--metrics", action="store_true", help="Log session metrics on exit")

    subparsers = parser.add_subparsers(dest="command")

    val = subparsers.add_parser("validate", help="Validate a founder profile JSON")
    val.add_argument("--input", required=True, help="Path to profile JSON")
    val.add_argument("--strict", action="store_true", help="Reject unknown fields and inconsistent answers")
    val.set_defaults(func=cmd_validate)

    summ = subparsers.add_parser("summarize", help="Print the founder summary for a profile JSON")
    summ.add_argument("--input", required=True, help="Path to profile JSON")
    summ.set_defaults(func=cmd_summarize)

    mat = subparsers.add_parser("match", help="Pick the best idea for a profile JSON")
    mat.add_argument("--input", required=True, help="Path to profile JSON")
    mat.add_argument("--exclude", help="Comma-separated idea ids to skip")
    mat.set_defaults(func=cmd_match)

    brk = subparsers.add_parser("breakdown", help="Explain the match score of one idea")
    brk.add_argument("--input", required=True, help="Path to profile JSON")
    brk.add_argument("--idea", required=True, help="Catalog idea id")
    brk.set_defaults(func=cmd_breakdown)

    cmp_ = subparsers.add_parser("compare", help="Compare up to 4 ideas side by side")
    cmp_.add_argument("--input", required=True, help="Path to profile JSON")
    cmp_.add_argument("--ideas", required=True, help="Comma-separated idea ids")
    cmp_.set_defaults(func=cmd_compare)

    cat = subparsers.add_parser("catalog", help="List the idea catalog")
    cat.set_defaults(func=cmd_catalog)

    def user_command(name, help_text, func, with_idea=False):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--user", required=True, help="User id")
        sub.add_argument("--db", help="Path to SQLite database (default: $IDEAMATCH_DB or data/ideamatch.db)")
        if with_idea:
            sub.add_argument("--idea", required=True, help="Catalog idea id")
        sub.set_defaults(func=func)
        return sub

    onb = user_command("onboard", "Store questionnaire answers and show the first match", cmd_onboard)
    onb.add_argument("--answers", required=True, help="Path to questionnaire answers JSON")

    user_command("next", "Show the best idea not yet dismissed", cmd_next)
    user_command("save", "Save an idea (creates its validation checklist)", cmd_save, with_idea=True)
    user_command("dismiss", "Dismiss an idea so it is not suggested again", cmd_dismiss, with_idea=True)
    user_command("saved", "List saved ideas with notes", cmd_saved)

    note = user_command("note", "Attach a note to an idea", cmd_note, with_idea=True)
    note.add_argument("--text", required=True, help="Note content")

    col = user_command("collect", "Add an idea to a named collection", cmd_collect, with_idea=True)
    col.add_argument("--name", required=True, help="Collection name (created if missing)")

    chk = user_command("checklist", "Show or tick off an idea's validation checklist", cmd_checklist, with_idea=True)
    chk.add_argument("--done", help="Comma-separated checklist item ids to mark completed")

    user_command("commit", "Enter decision mode for an idea", cmd_commit, with_idea=True)
    ext = user_command("exit-decision", "Leave decision mode", cmd_exit_decision)
    ext.add_argument("--reason", help="Why you are leaving decision mode")
    user_command("status", "Show decision mode state", cmd_status)

    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return

    if hasattr(args, "func"):
        try:
            args.func(args)
        finally:
            if args.metrics:
                logger.log_metrics_summary()
        return

    parser.print_help()


if __name__ == "__main__":
    main()
