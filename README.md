# orgchart

Building blocks for an organisation chart web service:

- `orgchart.person`: the `Person` record with dirty tracking and JSON conversion
- `orgchart.person_validation`: checks on JSON objects that describe a person
- `orgchart.person_sql`: SQL statements and bound arguments for the `person` table
- `orgchart.person_info`: `PersonInfo`, a read-only view of a person joined with
  job, department and manager
- `orgchart.tokens`: `JwtCodec`, HS256 token signing and verification
- `orgchart.jwt_plugin`: `JwtPlugin`, which builds a `JwtCodec` from configuration
- `orgchart.utils`: JSON error bodies and responses

## Installation

```
pip install .
```

## Person records

```python
from orgchart.person import Person
from orgchart.person_validation import validate_for_creation, ValidationError

data = {
    "job_id": 1,
    "department_id": 2,
    "manager_id": 3,
    "first_name": "Ada",
    "last_name": "Lovelace",
    "hire_date": "2020-01-15",
}

try:
    validate_for_creation(data)
except ValidationError as exc:
    print(exc)

person = Person.from_json(data)
person.last_name = "King"      # assigning a column marks it as changed
print(person.to_json())        # hire_date comes back as "2020-01-15"
```

The validators raise `ValidationError` (a `ValueError`) with a message such as
`"The job_id column cannot be null"` or `"Type error in the first_name field"`.
Integer columns must fit in 32 bits, names are limited to 50 bytes, and the id
may not be given for creation but must be given for update
(`validate_for_update`).

Person columns are `id`, `job_id`, `department_id`, `manager_id`,
`first_name`, `last_name` and `hire_date`. `hire_date` is held as a
`datetime.date`; `parse_date` reads the `YYYY-MM-DD` form.

The masqueraded variants (`Person.from_masqueraded_json`,
`Person.update_by_masqueraded_json`, `Person.to_masqueraded_json`,
`validate_masqueraded_for_creation`, `validate_masqueraded_for_update`) take a
list of seven aliases, one per column in the order above; an empty alias skips
that column. A list of the wrong length raises `ValidationError`, except in
`to_masqueraded_json`, which then falls back to `to_json()`.

`Person.from_row(row, index_offset)` reads a result row: by position from
`index_offset` onward, or by column name from a mapping when the offset is
negative.

## SQL helpers

`orgchart.person_sql` builds statements for PostgreSQL-style `$n` placeholders.
Only columns that were set on the `Person` are included; the id is always left
to the database.

```python
from orgchart.person_sql import sql_for_inserting, output_args

statement = sql_for_inserting(person)
print(statement.sql)
# insert into person (id,job_id,department_id,manager_id,first_name,last_name,hire_date)
#  values (default,$1,$2,$3,$4,$5,$6) returning *
print(output_args(person))
```

Also available: `insert_columns`, `update_columns`, `update_args`,
`sql_for_finding_by_primary_key` and `sql_for_deleting_by_primary_key`.

## Joined view

`PersonInfo.from_row(row, index_offset)` reads a person joined with
`job_title`, `department_name` and `manager_full_name`. Positional rows hold
the seven person columns followed by those three. `to_json()` returns a dict;
a null `department_name` is left out of it.

## Tokens

```python
from orgchart.jwt_plugin import JwtPlugin

config = {
    "secret": "secret",
    "sessionTime": 3600,
    "issuer": "auth0",
}

plugin = JwtPlugin()
plugin.init_and_start(config)
codec = plugin.init()

signed = codec.encode("user_id", 42)
claims = codec.decode(signed)
print(claims["user_id"])  # "42"
```

Missing configuration keys fall back to the defaults shown above. Tokens carry
the issuer, issue time and expiry (`sessionTime` seconds later); `decode`
raises the `jwt.InvalidTokenError` family for a bad signature, a wrong issuer
or an expired token.

## Error bodies

`orgchart.utils.make_err_resp(err)` returns `{"error": err}`;
`bad_request(err, code=400)` returns a `JsonResponse` with `status` and `body`.

## What this package does not do

It has no HTTP server, routes or command-line program, and it does not connect
to a database: the SQL helpers only build statements and argument lists for
you to run with a driver of your choice.