# authsvc

Building blocks for an OpenID Connect authentication service. The package
uses only the standard library and needs Python 3.10 or later.

| Module | What it holds |
| --- | --- |
| `authsvc.http_codec` | percent-encoding, query and form data, Basic auth, `Set-Cookie` and `Cookie` values, header name constants |
| `authsvc.uri` | `Uri`, `PathQueryFragment`, `UriError` |
| `authsvc.client` | `HttpClient`, `HttpResponse` |
| `authsvc.randomness` | `Random`, `RandomGenerator` |
| `authsvc.session_string_generator` | `SessionStringGenerator` |
| `authsvc.time_service` | `TimeService` |
| `authsvc.trigger_rules` | `MatchType`, `StringMatch`, `TriggerRule`, `match_string`, `trigger_rule_matches_path` |
| `authsvc.config` | `LogLevel`, `validate_uri`, `configured_log_level`, `configured_address` |

## HTTP codecs

```python
from authsvc.http_codec import (
    url_safe_encode,
    url_safe_decode,
    encode_form_data,
    decode_form_data,
    encode_basic_auth,
    encode_set_cookie,
    decode_cookies,
)

url_safe_encode("a b/c")                    # 'a%20b%2Fc'
url_safe_decode("a%20b%2Fc")                # 'a b/c'

encode_form_data({"b": "x y", "a": "1"})    # 'a=1&b=x+y'
decode_form_data("a=1&b=x+y")               # [('a', '1'), ('b', 'x y')]

password = "password"
encode_basic_auth("user", password)         # 'Basic dXNlcjpwYXNzd29yZA=='

encode_set_cookie("session", "token", {"Secure", "HttpOnly"})
# 'session=token; HttpOnly; Secure'

decode_cookies("first=1; second=2")         # {'first': '1', 'second': '2'}
```

- Only the unreserved characters `A-Z a-z 0-9 - _ . ~` are left as they
  are; every other character is UTF-8 encoded and written as `%XX`.
- `encode_query_data` and `encode_form_data` take a mapping or an iterable
  of `(key, value)` pairs and emit them ordered by key.
  `decode_query_data` and `decode_form_data` return a list of
  `(key, value)` pairs ordered by key.
- The form functions turn spaces into `+` when encoding and `+` back into
  spaces when decoding. The query functions write spaces as `%20`.
- `encode_set_cookie` removes duplicate directives and emits them in
  sorted order.
- In `decode_cookies`, a value may itself contain `=`. When a name
  repeats, the first value wins.
- The decoders raise `ValueError` on malformed input. This covers a bad
  percent escape, a pair without exactly one `=`, and a cookie without
  `=`.

The module also defines header name constants such as `AUTHORIZATION`,
`COOKIE` and `SET_COOKIE`, and directive constants such as
`SET_COOKIE_SECURE`, `SET_COOKIE_HTTP_ONLY`,
`SET_COOKIE_SAME_SITE_STRICT` and `CONTENT_TYPE_FORM_URL_ENCODED`.

## URIs

```python
from authsvc.uri import Uri, UriError, PathQueryFragment

uri = Uri("https://www.example.com:8443/callback?x=1#top")
uri.scheme, uri.host, uri.port       # ('https', 'www.example.com', 8443)
uri.path_query_fragment              # '/callback?x=1#top'
uri.path, uri.query, uri.fragment    # ('/callback', 'x=1', 'top')
uri.has_query(), uri.has_fragment()  # (True, True)

Uri("http://example.com").port       # 80

try:
    Uri("ftp://host")
except UriError as exc:
    print(exc)       # uri must be http or https scheme: ftp://host
```

Only `http://` and `https://` URIs are accepted. When no port is given,
the scheme's default port is used. When no path is given, the path is
`/`. `UriError` is a subclass of `ValueError`. It is raised in these
cases:

- the host is missing;
- the port is not a number;
- the port lies outside 0 to 65535.

`PathQueryFragment("/p?q#f")` splits a path into `path`, `query` and
`fragment`. A `?` that appears after the `#` is part of the fragment.

## Sending a POST request

```python
from authsvc.client import HttpClient

client = HttpClient(timeout=10)
response = client.post(
    "https://idp.example.com/token",
    {"Content-Type": "application/x-www-form-urlencoded"},
    "grant_type=authorization_code",
)
if response is not None:
    print(response.status, response.header("content-type"), response.text)
```

`post` sends the request over TLS 1.2 only. It verifies the server's
certificate chain against the system's trusted roots. It does not check
the certificate's host name.

Two optional arguments change this behaviour:

- `ca_cert` takes a PEM certificate authority to trust in addition to
  the system roots.
- `proxy_uri` takes an HTTP proxy address; the request is then tunnelled
  through it with `CONNECT`.

A `Host` header is always sent; headers you pass are added to it. Any
failure is logged at INFO level and `post` returns `None` instead of
raising.

An `HttpResponse` holds `status`, `reason`, `headers` (as a tuple of
pairs) and `body` (as bytes). It also offers `text` and
`header(name)`, a case-insensitive lookup of the first header with that
name.

## Random values and session strings

```python
from authsvc.randomness import Random, RandomGenerator
from authsvc.session_string_generator import SessionStringGenerator

value = RandomGenerator().generate(32)
len(value)                                      # 32
Random.from_string(value.to_string()) == value  # True

generator = SessionStringGenerator()
len(generator.generate_session_id())   # 86 characters (64 random bytes)
len(generator.generate_state())        # 43 characters (32 random bytes)
len(generator.generate_nonce())        # 43 characters (32 random bytes)
```

Random bytes come from the `secrets` module. `Random.to_string` writes
unpadded URL-safe base64. `Random.from_string` also accepts padded input
and raises `ValueError` on anything else. `Random` values compare in
constant time and are not hashable.

## Clock

`TimeService().current_time_seconds()` returns whole seconds since the
Unix epoch. You can subclass it to control time in tests.

## Trigger rules

```python
from authsvc.trigger_rules import StringMatch, TriggerRule, trigger_rule_matches_path

rules = [
    TriggerRule(
        excluded_paths=(StringMatch.exact("/good-x"),),
        included_paths=(StringMatch.prefix("/good"),),
    )
]
trigger_rule_matches_path("/good-1", rules)   # True
trigger_rule_matches_path("/good-x", rules)   # False
trigger_rule_matches_path("/other", rules)    # False
```

A rule matches a path in these cases:

- none of its excluded paths match, and its included paths are empty;
- none of its excluded paths match, and at least one included path
  matches.

A path triggers if any rule matches it. An empty path, or an empty list
of rules, always triggers.

`match_string` supports exact, prefix, suffix and regex matchers. A
regex must match the whole string. A `StringMatch` with no `MatchType`
never matches.

## Configuration checks

```python
from authsvc.config import validate_uri, configured_address, configured_log_level

validate_uri("https://idp.example.com/token", "token_uri", "https")  # a Uri
configured_address("0.0.0.0", 10003)   # '0.0.0.0:10003'
configured_log_level("info")           # LogLevel.INFO
```

`validate_uri` returns the parsed `Uri`. It raises `ValueError` in these
cases:

- the URI cannot be parsed;
- it carries a query or a fragment;
- its scheme is not the required one.

`configured_log_level` accepts `trace`, `debug`, `info`, `error`,
`critical`, or an empty string, which means `trace`. Any other value
raises `ValueError`. The `LogLevel` values are integers that match the
`logging` module's levels. The exception is `TRACE`, which is 5.

## What this package does not do

This is a library of parts. It has no command to run and no
authorization server. It contains no OIDC login flow and no session
store. It does not load a configuration file; `authsvc.config` only
checks and interprets individual settings that you pass to it.