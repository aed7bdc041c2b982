import logging

from rich.logging import RichHandler
import uvicorn

from mealfinder import config


def main() -> None:
    conf = config.Config()
    logging.basicConfig(
        level=conf.log_level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )
    uvicorn.run(
        "mealfinder.app:app",
        host=conf.host,
        port=conf.port,
        reload=conf.debug,
        log_level=conf.log_level.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    main()
