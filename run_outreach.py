"""
Outreach Runner - Review Requests From the Command Line
========================================================

Talks to the REST backend (start it with `python main.py`, or point
REVIEW_API_URL at another deployment).

    python run_outreach.py                      # list clients ready for outreach
    python run_outreach.py --send               # send the best platform to each of them
    python run_outreach.py --client 3 --platform yelp --message "Thanks!"

A failed dispatch is reported and the run moves on; nothing is retried.
"""

import argparse
import logging
import sys

from reviewcompass.application import OutreachService
from reviewcompass.domain.errors import (
    ClientNotFoundError,
    DispatchError,
    GatewayError,
    IncompleteSelectionError,
)
from reviewcompass.infrastructure.api import ReviewApiClient
from reviewcompass.infrastructure.config import get_settings

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def build_service() -> OutreachService:
    settings = get_settings()
    for issue in settings.validate():
        print(issue)
    return OutreachService(
        ReviewApiClient(),
        industry=settings.business.rule_industry,
        business_name=settings.business.display_name,
    )


def choose_platform(service: OutreachService, history):
    """Recommended platform if it is still open for this client, else the suggested one."""
    rec = service.recommend_for(history)
    if rec.platform and rec.available:
        return rec.platform
    return history.suggested_platform


def list_ready(service: OutreachService) -> int:
    ready = service.ready_clients()
    if not ready:
        print("No clients ready for outreach. Every platform has been requested.")
        return 0

    print(f"Found {len(ready)} clients ready for outreach\n")
    for history in ready:
        rec = service.recommend_for(history)
        flag = "" if rec.available else " (already requested)"
        recommended = rec.platform.name if rec.platform else "-"
        print(f"  {history.client.id:>4}  {history.client.name:<24} "
              f"{len(history.available_platforms)} available  "
              f"recommended: {recommended}{flag}")
    return 0


def send_all(service: OutreachService) -> int:
    ready = service.ready_clients()
    if not ready:
        print("No clients ready for outreach. All done!")
        return 0

    sent = failed = 0
    for history in ready:
        client = history.client
        platform = choose_platform(service, history)
        print(f"\n{'─' * 40}")
        print(f"Processing: {client.name} -> {platform.name}")
        try:
            created = service.send_request(client.id, platform.id)
        except DispatchError as e:
            print(f"   Send failed: {e}")
            failed += 1
            continue
        print(f"   Sent! Review link: {created.request_url}")
        sent += 1

    print("\n" + "=" * 60)
    print(f"Outreach complete: {sent} sent, {failed} failed")
    stats = service.stats()
    print(f"   Total: {stats.total} | Completed: {stats.completed} | Success rate: {stats.completion_rate}%")
    print("=" * 60 + "\n")
    return 1 if failed else 0


def send_one(service: OutreachService, client_id, platform_id, message) -> int:
    try:
        created = service.send_request(client_id, platform_id, message)
    except (IncompleteSelectionError, ClientNotFoundError) as e:
        print(f"Cannot send: {e}")
        return 2
    except DispatchError as e:
        print(f"Send failed: {e}")
        return 1
    print(f"Sent {created.platform} review request to {created.client_name}: {created.request_url}")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Send review requests to clients")
    parser.add_argument("--send", action="store_true", help="send to every client ready for outreach")
    parser.add_argument("--client", type=int, help="client id to send a single request to")
    parser.add_argument("--platform", help="platform id for --client (google, yelp, ...)")
    parser.add_argument("--message", help="custom message instead of the default template")
    args = parser.parse_args(argv)

    service = build_service()
    try:
        if args.client is not None or args.platform:
            return send_one(service, args.client, args.platform, args.message)
        if args.send:
            return send_all(service)
        return list_ready(service)
    except GatewayError as e:
        logger.error(f"Backend unavailable: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
