import uvicorn

from .settings import get_settings


def main() -> None:
	settings = get_settings()
	uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT, reload=settings.DEBUG)


if __name__ == "__main__":
	main()
