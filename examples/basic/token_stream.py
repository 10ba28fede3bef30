"""Inspect the lossless token stream and write it back unchanged."""

from sql_lexer import lex

sql = "SELECT a, b -- columns\nFROM t WHERE x = 'it''s'"
tokens = lex(sql)

for token in tokens:
    print(f"{token.location!s:>6}  {token.kind.name:<18} {token.text!r}")

assert tokens.write() == sql
