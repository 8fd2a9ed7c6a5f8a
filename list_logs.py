import argparse
import sys

from rawslogs.config import ClientSettings, log
from rawslogs.errors import DataIntegrityError
from rawslogs.logs_api import LogsApi
from rawslogs.retrieval import EventQuery, LogRetriever


def build_parser():
    parser = argparse.ArgumentParser(description="List CloudWatch log groups, streams and events.")
    parser.add_argument("-p", "--profile", help="The AWS profile to use")
    parser.add_argument("--region", help="AWS region (defaults to the profile's region)")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("groups", help="List log groups")

    streams = sub.add_parser("streams", help="List log streams of a log group")
    streams.add_argument("group", help="The name of the log group")

    events = sub.add_parser("events", help="List log events of a log group")
    events.add_argument("group", help="The name of the log group")
    events.add_argument("-s", "--start", default="1 hour ago", help="Only show events newer than this, e.g. '2 hours'")
    events.add_argument("-e", "--end", help="Only show events older than this, e.g. '10m'")
    return parser


def run(args, retriever: LogRetriever) -> None:
    if args.command == "groups":
        retriever.list_groups()
    elif args.command == "streams":
        retriever.list_streams(args.group)
    else:
        retriever.list_events(EventQuery(group=args.group, start=args.start, end=args.end))


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    settings = ClientSettings.from_env(profile=args.profile, region=args.region)
    retriever = LogRetriever(LogsApi(settings=settings))
    try:
        run(args, retriever)
    except DataIntegrityError as e:
        log.error(f"[cli] aborting: {e}")
        return 2
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
