import uvicorn

from forum.config import settings


def main() -> None:
    uvicorn.run("forum.app:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
