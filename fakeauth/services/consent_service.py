"""Consent step: show a one-button page, then release the browser to the client.

The consent ticket is never parsed here.  GET embeds it in a hidden form
field; POST redirects to whatever came back in that field, byte for byte.

The page carries the ticket verbatim, with one exception: a single quote
would end the value='...' attribute, so it is written as &#x27;.  Tickets
built by /fakeauth never contain one (urlencode percent-encodes it in the
state), but a redirect_uri can.  A browser decodes the entity before
submitting the form, so the POST still receives the original ticket.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from urllib.parse import quote

from fakeauth.core.metrics import CONSENT_ACTIONS
from fakeauth.models.handler_response import HandlerResponse

logger = logging.getLogger(__name__)

CONSENT_PATH = "/login"
TICKET_PARAM = "responseurl"
CONSENT_COPY = "Link this service to Google"

# Only the attribute delimiter is escaped; "<", ">" and "&" are legal inside a
# quoted attribute value and stay verbatim.
_ATTR_ESCAPES = str.maketrans({"'": "&#x27;"})

# Percent-encoding fallback for Location values an HTTP header can't carry.
_LOCATION_SAFE = ":/?#[]@!$&'()*+,;=%~"

_CONSENT_HTML = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>Account linking</title>
  <style>
    body {{
      font-family: system-ui, -apple-system, sans-serif;
      display: flex; justify-content: center; align-items: center;
      min-height: 100vh; margin: 0; background: #f5f5f5;
    }}
    .card {{
      background: #fff; padding: 2rem; border-radius: 8px;
      box-shadow: 0 2px 8px rgba(0,0,0,.1); width: 320px; text-align: center;
    }}
    h1 {{ font-size: 1.25rem; margin-bottom: 1.5rem; }}
    button {{
      width: 100%; padding: .6rem; background: #111; color: #fff;
      border: none; border-radius: 4px; font-size: .95rem; cursor: pointer;
    }}
  </style>
</head>
<body>
  <div class="card">
    <form action='{action}' method='post'>
      <input type='hidden' name='{param}' value='{ticket}'/>
      <h1>{copy}</h1>
      <button type='submit'>Link</button>
    </form>
  </div>
</body>
</html>
"""


def render_consent_page(ticket: str) -> str:
    return _CONSENT_HTML.format(
        action=CONSENT_PATH,
        param=TICKET_PARAM,
        ticket=ticket.translate(_ATTR_ESCAPES),
        copy=CONSENT_COPY,
    )


def _header_safe(location: str) -> str:
    if "\r" in location or "\n" in location:
        unsafe = True
    else:
        try:
            location.encode("latin-1")
            unsafe = False
        except UnicodeEncodeError:
            unsafe = True
    if not unsafe:
        return location
    logger.warning("FAKE OAUTH [consent] ticket not header-safe, percent-encoding it")
    return quote(location, safe=_LOCATION_SAFE)


def _show(params: Mapping[str, str]) -> HandlerResponse:
    ticket = params.get(TICKET_PARAM, "")
    CONSENT_ACTIONS.labels(action="shown").inc()
    logger.info(
        "FAKE OAUTH [consent] step 1: rendering consent page  ticket=%s", ticket
    )
    return HandlerResponse.html(render_consent_page(ticket))


def _grant(params: Mapping[str, str]) -> HandlerResponse:
    ticket = params.get(TICKET_PARAM, "")
    if not ticket:
        logger.warning(
            "FAKE OAUTH [consent] consent granted without a %s", TICKET_PARAM
        )
    CONSENT_ACTIONS.labels(action="granted").inc()
    logger.info(
        "FAKE OAUTH [consent] step 2: consent granted, redirecting  to=%s", ticket
    )
    return HandlerResponse.redirect(_header_safe(ticket))


_METHODS: dict[str, Callable[[Mapping[str, str]], HandlerResponse]] = {
    "GET": _show,
    "POST": _grant,
}


def handle_consent(method: str, params: Mapping[str, str]) -> HandlerResponse:
    handler = _METHODS.get(method.upper(), _show)
    return handler(params)
