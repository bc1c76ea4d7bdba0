# ruriko

Small building blocks shared by an agent control plane and its agents:

- `ruriko.crypto`: AES-256-GCM encryption of secrets at rest, and parsing of a
  hex-encoded master key.
- `ruriko.environment`: typed readers for configuration held in environment
  variables, with defaults.
- `ruriko.redact`: removal of sensitive values from strings and mappings before
  they reach logs.
- `ruriko.retry`: retries with exponential backoff for transient failures.
- `ruriko.trace`: trace ID generation and propagation through the current context.
- `ruriko.version`: build version information.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Usage

### Encrypting secrets

```python
from ruriko.crypto import encrypt, decrypt, parse_master_key
from ruriko.environment import required_string

key = parse_master_key(required_string("RURIKO_MASTER_KEY"))  # 64 hex characters -> 32 bytes
blob = encrypt(key, b"token")       # 12-byte random nonce followed by the sealed data
assert decrypt(key, blob) == b"token"
```

`parse_master_key` strips surrounding whitespace. It raises `MasterKeyError`
when the text is empty, is not valid hex, or does not decode to exactly 32 bytes.

`encrypt` and `decrypt` raise these errors:

- `InvalidKeySizeError` if the key is not 32 bytes long.
- `CiphertextTooShortError` if the input is shorter than the 12-byte nonce.
- `DecryptionError` if authentication fails, for example because the data was
  tampered with or the key is wrong.

All of these errors derive from `CryptoError`. `InvalidKeySizeError`,
`CiphertextTooShortError` and `MasterKeyError` are also `ValueError`s. The module
exposes `KEY_SIZE` (32) and `NONCE_SIZE` (12).

### Reading configuration

```python
from datetime import timedelta
from ruriko.environment import (
    lookup, required_string, string_or, bool_or, int_or, duration_or, string_list_or,
)

homeserver = required_string("MATRIX_HOMESERVER")   # MissingVariableError if unset or empty
raw = lookup("GITAI_GOSUTO_FILE")                   # None if unset, "" if set but empty
db_path = string_or("DATABASE_PATH", "./ruriko.db")
docker = bool_or("DOCKER_ENABLE", False)            # 1/t/T/true/TRUE/True and the false forms
max_tokens = int_or("LLM_MAX_TOKENS", 0)            # signed decimal, 64-bit range
interval = duration_or("RECONCILE_INTERVAL", timedelta(seconds=30))  # "30s", "1h30m", "-1.5ms"
rooms = string_list_or("MATRIX_ADMIN_ROOMS", None)  # comma-separated, items trimmed
```

Each reader returns the default when the variable is unset or empty, and also
when its value cannot be parsed. `string_list_or` drops empty items, and returns
the default if no items are left. `MissingVariableError` is a `LookupError` and
carries the variable's name in `.name`.

You can also call the parsers directly. `parse_bool(text)` returns a `bool`, and
`parse_duration(text)` returns a `timedelta` with the units ns, us, µs, ms, s, m
and h. Both raise `ValueError` on malformed input.

### Redacting log output

```python
from ruriko.redact import redact_string, redact_map, is_sensitive_key

redact_string("calling with token secret", "secret")
# 'calling with token [REDACTED]'

redact_map({"api_key": "placeholder", "user": "bot", "auth_token": ""})
# {'api_key': '[REDACTED]', 'user': 'bot', 'auth_token': ''}
```

`redact_string` never redacts a value shorter than four bytes when encoded as
UTF-8. This avoids replacing common short substrings.

`redact_map` returns a shallow copy of the mapping. It replaces a value only when
both of these are true:

- The key contains one of these words, in any case: password, passwd, token,
  secret, key, credential, auth or apikey. `is_sensitive_key` performs this check.
- The value is a non-empty string.

### Retrying

```python
import threading
from ruriko.retry import RetryConfig, RetryCancelledError, call_with_retry

cancel = threading.Event()
config = RetryConfig(max_attempts=3, initial_delay=0.5, max_delay=10.0)
result = call_with_retry(fetch, config, cancel)
```

`call_with_retry` returns whatever `fn` returns. If `fn` raises, it waits and tries
again. The delay starts at `initial_delay` seconds and doubles after each failure,
up to `max_delay`. Other settings behave as follows:

- A non-positive `max_attempts` means one attempt.
- Non-positive delays fall back to 0.5 s and 10 s.

The last exception is re-raised in either of these cases:

- The attempts run out.
- `should_retry(exc)` returns false.

If `cancel` is set before an attempt or during a wait, the call stops with
`RetryCancelledError`. That error carries the last failure in `.last_error`.

Failed attempts are logged at debug level on the `ruriko.retry` logger.

### Trace IDs

```python
from ruriko.trace import generate_id, trace_context, current_trace_id

with trace_context(generate_id()):
    print(current_trace_id())   # e.g. 't_3f9c...' ("t_" + 32 hex digits)
print(current_trace_id())       # ''
```

The trace ID is held in a context variable. Nested blocks restore the outer ID
when they exit. Threads and asyncio tasks each see their own value.

### Version

```python
from ruriko.version import info, VERSION, GIT_COMMIT, BUILD_TIME
print(info())   # 'v0.0.0-dev (unknown) built at unknown'
```

## What this package does not do

This package is a library only. It does not include:

- a control-plane service or agent runtime
- a Matrix client
- an HTTP server
- storage
- a command-line program

It provides the pieces such programs are built from.