# -*- coding: utf-8 -*-
import argparse
import logging

from hireloop.config import DBConfig, ServerConfig, setup_logging

logger = logging.getLogger("hireloop.cli")


def cmd_serve(args) -> None:
    import uvicorn

    uvicorn.run(
        "hireloop.api:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


def cmd_init_db(args) -> None:
    from hireloop.db.database import init_db

    init_db()
    logger.info(f"Database ready at {DBConfig.URL}")


def main():
    setup_logging()

    p = argparse.ArgumentParser(description="HireLoop: recruiting backend (jobs, candidates, AI-assisted hiring).")
    sub = p.add_subparsers(dest="command")

    serve = sub.add_parser("serve", help="Run the REST API with uvicorn")
    serve.add_argument("--host", default=ServerConfig.HOST, help="Bind address")
    serve.add_argument("--port", type=int, default=ServerConfig.PORT, help="Bind port")
    serve.add_argument("--reload", action="store_true", help="Auto-reload on code changes (dev)")
    serve.set_defaults(func=cmd_serve)

    init = sub.add_parser("init-db", help="Create tables and apply column migrations")
    init.set_defaults(func=cmd_init_db)

    args = p.parse_args()
    if not getattr(args, "func", None):
        p.print_help()
        return
    args.func(args)


if __name__ == "__main__":
    main()
