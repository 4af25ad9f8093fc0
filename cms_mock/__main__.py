"""Run the mock server: ``python -m cms_mock``.

HOST and PORT come from settings (env vars or ``.env``).
"""

from __future__ import annotations

import uvicorn

from cms_mock.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("cms_mock.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
