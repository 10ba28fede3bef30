"""Thread safe, no global state: sanitize 1000 queries in parallel."""

from concurrent.futures import ThreadPoolExecutor

from sql_lexer import MYSQL, SanitizeConfig, Sanitizer, lex

queries = [f'SELECT * FROM t WHERE id = {i} AND name = "user{i}"' for i in range(1000)]
sanitizer = Sanitizer(SanitizeConfig(placeholder="$?"))


def shape(sql: str) -> str:
    return sanitizer.sanitize(lex(sql, dialect=MYSQL)).write()


with ThreadPoolExecutor(max_workers=8) as ex:
    shapes = set(ex.map(shape, queries))

print(f"{len(queries)} queries, {len(shapes)} distinct shape(s):")
for s in shapes:
    print(" ", s)
