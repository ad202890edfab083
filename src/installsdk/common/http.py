from __future__ import annotations

import logging
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from installsdk import __version__ as INSTALLSDK_VERSION
from installsdk.common.config import RuntimeConfig


log = logging.getLogger(__name__)

USER_AGENT = f"installsdk/{INSTALLSDK_VERSION}"


def build_session(runtime: RuntimeConfig) -> requests.Session:
    session = requests.Session()
    retry = Retry(
        total=runtime.max_retries,
        connect=runtime.max_retries,
        read=runtime.max_retries,
        status=runtime.max_retries,
        backoff_factor=runtime.backoff_factor,
        backoff_jitter=0.25,
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods=frozenset({"GET", "HEAD"}),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.headers["User-Agent"] = USER_AGENT
    return session


def get_json(session: requests.Session, url: str, runtime: RuntimeConfig) -> Any:
    log.info("Fetching %s", url)
    resp = session.get(url, timeout=runtime.timeout)
    try:
        resp.raise_for_status()
        return resp.json()
    finally:
        resp.close()
