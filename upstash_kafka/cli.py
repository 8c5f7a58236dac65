#!/usr/bin/env python3
"""
Command line front end for the Upstash Kafka client.

Management commands read UPSTASH_EMAIL / UPSTASH_API_KEY, data-plane commands
read KAFKA_USERNAME / KAFKA_PASSWORD / KAFKA_REST_SERVER. Results are printed
as JSON.
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, List, Optional

from .client import Client
from .exceptions import UpstashError
from .models import (
    ConsumeRequest,
    FetchRequest,
    Message,
    dump_payload,
)
from .utils.logging import LogContext, clear_request_context, set_request_context, setup_logging


logger = logging.getLogger(__name__)


def _management(name):
    async def call(client: Client, args: argparse.Namespace) -> Any:
        ids = (args.id,) if getattr(args, "id", None) is not None else ()
        return await getattr(client.kafka(), name)(*ids)
    return call


async def _produce(client: Client, args: argparse.Namespace) -> Any:
    message = Message.new(args.topic, args.value, partition=args.partition, key=args.key)
    return await client.produce_api().produce([message])


async def _fetch(client: Client, args: argparse.Namespace) -> Any:
    request = FetchRequest(topic=args.topic, partition=args.partition, offset=args.offset)
    return await client.fetch_api().fetch(request)


async def _consume(client: Client, args: argparse.Namespace) -> Any:
    return await client.consume_api().consume(args.group, args.consumer, ConsumeRequest(topic=args.topic))


async def _consumers(client: Client, args: argparse.Namespace) -> Any:
    return await client.consumer_admin().list_consumers()


# command -> (needs REST proxy client, coroutine)
COMMANDS = {
    "clusters": (False, _management("list_clusters")),
    "cluster": (False, _management("get_cluster")),
    "topics": (False, _management("list_topics")),
    "topic": (False, _management("get_topic")),
    "credentials": (False, _management("list_credentials")),
    "cluster-stats": (False, _management("cluster_stats")),
    "topic-stats": (False, _management("topic_stats")),
    "produce": (True, _produce),
    "fetch": (True, _fetch),
    "consume": (True, _consume),
    "consumers": (True, _consumers),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="upstash-kafka",
        description="Manage Upstash Kafka clusters and exchange messages over the REST proxy",
    )
    parser.add_argument("--log-level", default=None, help="Log level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("clusters", help="List clusters")
    sub.add_parser("cluster", help="Show a cluster").add_argument("id", help="Cluster ID")
    sub.add_parser("topics", help="List topics of a cluster").add_argument("id", help="Cluster ID")
    sub.add_parser("topic", help="Show a topic").add_argument("id", help="Topic ID")
    sub.add_parser("credentials", help="List credentials")
    sub.add_parser("cluster-stats", help="Show cluster statistics").add_argument("id", help="Cluster ID")
    sub.add_parser("topic-stats", help="Show topic statistics").add_argument("id", help="Topic ID")

    produce = sub.add_parser("produce", help="Produce one message")
    produce.add_argument("topic")
    produce.add_argument("value")
    produce.add_argument("--key", default=None)
    produce.add_argument("--partition", type=int, default=None)

    fetch = sub.add_parser("fetch", help="Fetch messages from a partition offset")
    fetch.add_argument("topic")
    fetch.add_argument("partition", type=int)
    fetch.add_argument("offset", type=int)

    consume = sub.add_parser("consume", help="Poll a topic as a consumer group member")
    consume.add_argument("group")
    consume.add_argument("consumer")
    consume.add_argument("topic")

    sub.add_parser("consumers", help="List consumer groups")

    return parser


async def run(args: argparse.Namespace) -> Any:
    needs_rest, call = COMMANDS[args.command]
    factory = Client.rest_from_env if needs_rest else Client.from_env
    set_request_context(command=args.command)
    try:
        with LogContext(args.command, logger=logger):
            async with factory(request_timeout=args.timeout) as client:
                return await call(client, args)
    finally:
        clear_request_context()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.log_level:
        setup_logging(log_level=args.log_level)

    try:
        result = asyncio.run(run(args))
    except UpstashError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(dump_payload(result), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
