"""Syntax analysis for the letlang language. Interprets a token stream as a sequence of statements and produces the
final variable bindings.

All grammar can be loosely defined as follows:

```
<let_stmt>    ::= "let" <word> "be" <token>   ; declares <word> and binds it to the literal next token
<assign_stmt> ::= <word> "=" <token>          ; rebinds the most recently declared name
```

There are no expressions: the bound value is always the string value of the token following 'be' or '=', whatever
its kind. 'be' and '=' always bind to the name of the most recent 'let' (the empty string if there was none), so
`let x be 5 y = 10` rebinds x, not y. The last write to a name wins.
"""

from letlang.lang.error import ParseError
from letlang.lang.token import TokenKind


def parse(tokens):
    """Returns a dict of name: value bindings given a list of Tokens. Raises ParseError if a 'let' is not followed by
    a Word. Note that the last token is only ever looked at as the successor of another token.
    """
    bindings = {}
    last_key = ""
    idx = 0

    while idx < len(tokens) - 1:
        token, following = tokens[idx], tokens[idx + 1]
        step = 0

        if token.kind == TokenKind.KEYWORD:
            # 'let' and 'be' are independent checks, not an exclusive branch
            if token.value == "let":
                if following.kind != TokenKind.WORD:
                    raise ParseError(token.position, following)
                last_key = following.value
                step += 2
            if token.value == "be":
                bindings[last_key] = following.value
                step += 2

        elif token.kind == TokenKind.OPERATOR and token.value == "=":
            bindings[last_key] = following.value
            step += 2

        idx += step or 1  # anything unrecognized is skipped

    return bindings
