"""Record a query's shape without its data in 2 lines, zero deps."""

from sql_lexer import sanitize_string

print(sanitize_string("SELECT * FROM `users` WHERE email = 'a@example.com' AND id = 42"))
