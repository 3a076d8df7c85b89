"""Run the Triangle Test Generator with uvicorn."""
import uvicorn

from .config import settings


def main():
    uvicorn.run("triangle_tester.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
