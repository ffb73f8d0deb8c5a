import argparse
import logging
import sys

from ..errors import InfrastructureError
from ..logging_setup import setup_logging
from .service import set_admin_claim

logger = logging.getLogger(__name__)


def main(argv=None, platform=None) -> int:
    """Entry point for the set-admin-claim console script."""
    parser = argparse.ArgumentParser(
        prog="set-admin-claim",
        description="Grant the admin custom claim to a Firebase user"
    )
    parser.add_argument("uid", help="uid of the user to promote")
    args = parser.parse_args(argv)

    setup_logging()

    try:
        set_admin_claim(args.uid, platform=platform)
    except InfrastructureError as e:
        logger.error(f"Failed to set admin claim for {args.uid}: {str(e)}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
