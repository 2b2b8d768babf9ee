"""
Run the server: python -m app.server
"""
import uvicorn

from app.core import config


def main():
    uvicorn.run("app.main:app", host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
