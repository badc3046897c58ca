"""
Internship Matcher CLI - Command line interface for internship matching.

Usage:
    python -m internship_matcher [command] [options]

Commands:
    match       Score your profile against one internship
    bulk        Score your profile against several internships by ID
    recommend   Rank the catalog into personalized recommendations
    insights    Skill demand, suggestions and application history
    config      Manage configuration

Examples:
    python -m internship_matcher recommend --profile me.json --catalog internships.json
    python -m internship_matcher match --profile me.json --internship-id intern-42
    python -m internship_matcher bulk --profile me.json --ids intern-1,intern-7 --json
    python -m internship_matcher insights --profile me.json --applications apps.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from internship_matcher.core import (
    ApplicationRecord,
    InternshipMatcher,
    InvalidInputError,
    SkillMatcher,
    UserProfile,
    build_insights,
)
from internship_matcher.integrations import (
    CatalogProvider,
    FileCatalogProvider,
    HttpCatalogProvider,
    bulk_match_ids,
)
from internship_matcher.utils import Config


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Internship Matcher - Score and rank internships for your profile",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--config", help="Path to config file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    def add_catalog_arguments(sub):
        sub.add_argument("--profile", "-p", required=True, help="Path to profile file (JSON)")
        sub.add_argument("--catalog", "-c", help="Path to internships file (JSON)")
        sub.add_argument("--url", help="Catalog API URL (overrides --catalog)")
        sub.add_argument("--json", action="store_true", help="Print JSON output")
        sub.add_argument("--output", "-o", help="Write JSON output to file")

    # Match command
    match_parser = subparsers.add_parser("match", help="Match profile against one internship")
    add_catalog_arguments(match_parser)
    match_parser.add_argument("--internship-id", "-i", required=True, help="Internship ID")

    # Bulk command
    bulk_parser = subparsers.add_parser("bulk", help="Match profile against internships by ID")
    add_catalog_arguments(bulk_parser)
    bulk_parser.add_argument("--ids", required=True, help="Comma-separated internship IDs")

    # Recommend command
    rec_parser = subparsers.add_parser("recommend", help="Recommend internships")
    add_catalog_arguments(rec_parser)
    rec_parser.add_argument("--limit", "-n", type=int, help="Number of recommendations")
    rec_parser.add_argument("--applications", "-a", help="Applications file (JSON)")
    rec_parser.add_argument("--include-applied", action="store_true",
                            help="Keep internships you already applied to")
    rec_parser.add_argument("--parallel", action="store_true", help="Score on a thread pool")

    # Insights command
    insights_parser = subparsers.add_parser("insights", help="Matching insights")
    add_catalog_arguments(insights_parser)
    insights_parser.add_argument("--applications", "-a", help="Applications file (JSON)")

    # Config command
    config_parser = subparsers.add_parser("config", help="Manage configuration")
    config_parser.add_argument("--show", action="store_true", help="Show current config")
    config_parser.add_argument("--set", nargs=2, metavar=("KEY", "VALUE"), help="Set a config value")
    config_parser.add_argument("--init", action="store_true", help="Initialize default config")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    commands = {
        "match": cmd_match,
        "bulk": cmd_bulk,
        "recommend": cmd_recommend,
        "insights": cmd_insights,
        "config": cmd_config,
    }

    try:
        config = Config(args.config)

        logging.basicConfig(
            level=logging.DEBUG if args.verbose else config.get_log_level(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

        commands[args.command](args, config)
    except KeyboardInterrupt:
        print("\n\nOperation cancelled.")
        sys.exit(1)
    except Exception as e:
        print(f"\nError: {e}")
        sys.exit(1)


def load_profile(path: str) -> UserProfile:
    """Load a user profile from a JSON file."""
    with open(path, 'r', encoding='utf-8') as f:
        return UserProfile.from_dict(json.load(f))


def load_applications(path) -> list[ApplicationRecord]:
    """Load application records from a JSON file, if one is given."""
    if not path:
        return []

    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("applications", [])
    if not isinstance(data, list):
        raise InvalidInputError("applications file must hold a list")

    return [ApplicationRecord.from_dict(item) for item in data]


def build_provider(args, config: Config) -> CatalogProvider:
    """Catalog provider from command line flags, falling back to config."""
    catalog = config.get_catalog_config()

    url = args.url or (None if args.catalog else catalog["url"])
    if url:
        return HttpCatalogProvider(url, api_key=catalog["api_key"], timeout=catalog["timeout"])

    return FileCatalogProvider(args.catalog or catalog["path"])


def build_matcher(profile: UserProfile, config: Config) -> InternshipMatcher:
    skill_matcher = SkillMatcher(cap_per_requirement=config.caps_per_requirement())
    return InternshipMatcher(profile, skill_matcher=skill_matcher)


def emit(args, payload) -> bool:
    """Write JSON output if requested. Returns True if handled."""
    if args.output:
        Path(args.output).write_text(json.dumps(payload, indent=2, default=str))
        print(f"💾 Saved results to {args.output}")
        return True

    if args.json:
        print(json.dumps(payload, indent=2, default=str))
        return True

    return False


def cmd_match(args, config: Config):
    """Execute match command."""
    profile = load_profile(args.profile)
    provider = build_provider(args, config)

    internship = provider.get_internship(args.internship_id)
    if internship is None:
        print(f"❌ Internship {args.internship_id} not found")
        sys.exit(1)

    match = build_matcher(profile, config).match_internship(internship)

    payload = {
        "match": match.to_dict(),
        "internship": {
            "id": internship.id,
            "title": internship.title,
            "company": internship.company,
        },
        "user": {"skills": list(profile.skills)},
    }
    if emit(args, payload):
        return

    breakdown = match.breakdown
    print(f"\n🎯 {internship.title} @ {internship.company}")
    print(f"   📈 Overall Match: {match.overall_score}%")
    print(f"   Skills {breakdown.skills_score} | Location {breakdown.location_score} | "
          f"Work type {breakdown.work_type_score} | Interests {breakdown.interest_score} | "
          f"Company {breakdown.company_score}")
    if match.skills_matched:
        print(f"   ✅ Matched Skills: {', '.join(match.skills_matched)}")
    if match.skills_gap:
        print(f"   ❌ Skills Gap: {', '.join(match.skills_gap)}")


def cmd_bulk(args, config: Config):
    """Execute bulk command."""
    profile = load_profile(args.profile)
    provider = build_provider(args, config)

    internship_ids = [i.strip() for i in args.ids.split(",") if i.strip()]
    if not internship_ids:
        raise InvalidInputError("--ids must name at least one internship")

    matches = bulk_match_ids(profile, internship_ids, provider, max_count=config.get_bulk_max())

    payload = {
        "matches": [m.to_dict() for m in matches],
        "metadata": {
            "requested": len(internship_ids),
            "processed": len(matches),
        },
    }
    if emit(args, payload):
        return

    print(f"\n📊 Matched {len(matches)} of {len(internship_ids)} internships\n")
    for i, row in enumerate(matches, 1):
        print(f"{i:2}. {row.title} @ {row.company} - {row.overall_score}%")


def cmd_recommend(args, config: Config):
    """Execute recommend command."""
    profile = load_profile(args.profile)

    if not profile.skills:
        print("Please add skills to your profile to get personalized recommendations")
        sys.exit(1)

    provider = build_provider(args, config)
    catalog = provider.list_internships(active_only=True)

    exclude_ids = []
    if not args.include_applied:
        exclude_ids = [a.internship_id for a in load_applications(args.applications)]

    limit = args.limit if args.limit is not None else config.get_recommendation_limit()

    recommendations = build_matcher(profile, config).recommend(
        catalog,
        limit=limit,
        exclude_ids=exclude_ids,
        parallel=args.parallel or config.is_parallel(),
        max_workers=config.get_max_workers(),
    )

    payload = {
        "recommendations": [r.to_dict() for r in recommendations],
        "userProfile": {
            "skills": list(profile.skills),
            "preferences": profile.preferences.to_dict(),
        },
        "metadata": {"totalInternships": len(catalog)},
    }
    if emit(args, payload):
        return

    print(f"\n🎯 Top {len(recommendations)} recommendations from {len(catalog)} internships\n")
    print("-" * 80)

    for i, rec in enumerate(recommendations, 1):
        internship = rec.internship
        print(f"\n{i}. {internship.title} @ {internship.company}")
        print(f"   Location: {internship.location}")
        print(f"   📈 Overall Match: {rec.overall_score}%")
        for reason in rec.reasons:
            print(f"   • {reason}")


def cmd_insights(args, config: Config):
    """Execute insights command."""
    profile = load_profile(args.profile)
    provider = build_provider(args, config)

    applications = load_applications(args.applications)
    catalog = provider.list_internships(active_only=True)

    insights = build_insights(
        profile,
        applications,
        catalog,
        lookup=provider.get_internship,
    )

    if emit(args, {"insights": insights}):
        return

    apps = insights["applications"]
    print("\n📊 Matching Insights")
    print("=" * 40)
    print(f"Skills: {insights['profile']['skillsCount']}")
    print(f"Applications: {apps['total']}")
    print(f"Average Match Score: {apps['averageMatchScore']}%")
    print(f"High Matches: {apps['highMatches']}")

    gaps = insights["recommendations"]["skillGaps"]
    if gaps:
        print("\nIn-demand skills you're missing:")
        for gap in gaps:
            print(f"  - {gap['skill']} ({gap['demand']} postings, {gap['priority']})")

    for suggestion in insights["recommendations"]["suggestedSkills"]:
        print(f"\n{suggestion['cluster']}: {suggestion['reason']}")
        print(f"  Try: {', '.join(suggestion['suggestedSkills'])}")


def cmd_config(args, config: Config):
    """Execute config command."""
    if args.init:
        config.save()
        print(f"✅ Created config at: {config.config_path}")

    elif args.show:
        print("\n📋 Current Configuration\n")
        print(json.dumps(config.masked(), indent=2))

    elif args.set:
        key, value = args.set
        # Try to parse as JSON for complex values
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            pass

        config.set(key, value)
        config.save()
        print(f"✅ Set {key} = {value}")

    else:
        print("Use --show, --set, or --init (API keys: --set api_keys.catalog KEY)")


if __name__ == "__main__":
    main()
