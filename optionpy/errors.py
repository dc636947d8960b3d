from __future__ import annotations


class ValueAbsent(ValueError):
    """Raised by `Option.expect` / `Option.unwrap` when there is no value.

    The message is kept verbatim so callers can match on it:

        ```python
        try:
            NONE.expect("user id missing")
        except ValueAbsent as e:
            assert str(e) == "user id missing"
        ```
    """
    def __init__(self, message: str):
        super().__init__(message); self.message = message
