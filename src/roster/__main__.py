"""Entry point for the roster backend."""

import argparse
import logging
import sys


def main():
    """Main entry point for the roster CLI."""
    parser = argparse.ArgumentParser(
        description="Roster - player profile API",
        prog="roster",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Server command
    server_parser = subparsers.add_parser("server", help="Start the HTTP server")
    server_parser.add_argument(
        "--host",
        default=None,
        help="Host to bind to (default: HOST setting, 0.0.0.0)",
    )
    server_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind to (default: PORT setting, 8080)",
    )
    server_parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )

    # Schema command
    subparsers.add_parser("init-db", help="Create the database tables and exit")

    args = parser.parse_args()

    if args.command == "server":
        import uvicorn

        from roster.config import get_settings

        settings = get_settings()
        uvicorn.run(
            "roster.server.app:app",
            host=args.host or settings.host,
            port=args.port or settings.port,
            reload=args.reload,
        )

    elif args.command == "init-db":
        from sqlalchemy.exc import SQLAlchemyError

        from roster.context import create_context
        from roster.db.session import create_tables

        logging.basicConfig(level=logging.INFO)
        ctx = create_context()
        try:
            create_tables(ctx.engine)
        except SQLAlchemyError as e:
            logging.getLogger(__name__).error(f"Could not create tables: {e}")
            sys.exit(1)
        finally:
            ctx.dispose()
        print(f"Tables created in {ctx.engine.url!r}")

    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
