# userservice

A small HTTP service for reading, creating and updating users. It is built
with Flask and stores users in SQLite.

## Layout

- `userservice.domain`: the `User` and `ConsumerInfo` dataclasses and the
  abstract `UserRepository` (`get_by_username`, `store`).
- `userservice.errors`: `DomainError` (with `code`, `message` and `kind`)
  and the `ErrorKind` enum: `NOT_FOUND`, `VALIDATION`, `INTERNAL`,
  `UNAUTHORIZED` and `FORBIDDEN`.
- `userservice.rules`: `UserValidator.validate`. It requires a user name and
  accepts only `active`, `inactive` or an empty status.
- `userservice.dto`: `UserRequest` (`from_dict`), `UserResponse`
  (`to_dict`), `to_user_response` and `to_user_domain`.
- `userservice.usecase`: `UserUsecase` with `get_user`, `create_user` and
  `update_user`.
- `userservice.facade`: `UserFacade`, which converts request objects to
  domain users and domain users to response objects.
- `userservice.repository`: `UserModel`, `open_database`, `create_schema`
  and `SqlUserRepository`, which reads from a main connection and writes to
  a replica connection.
- `userservice.handlers`: `handle_error`, `bind_and_validate` and
  `UserHandler`. Its methods return `(status, body)` pairs.
- `userservice.routes`: `RouteConfig`, `user_routes` and `BASE_URL`
  (`/v1`).
- `userservice.app`: `Config`, `load_config`, `App`, `init_app`,
  `build_server`, `CronScheduler`, `MyHandler` and `main`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the service

```
userservice
userservice --config settings.toml
```

`main` builds the application, starts two scheduled jobs and serves HTTP
with Flask's built-in server until it receives SIGINT or SIGTERM. The two
jobs print `run cron cron.link-account` and `run cron cron.notify` every
30 seconds. If the configuration or the databases cannot be loaded, `main`
logs the error and returns 1.

The configuration is a TOML file. Every key is optional:

```toml
[server]
host = "0.0.0.0"   # default
port = 8080        # default

[postgres]
path = "users.db"  # main SQLite database; reads go here

[replica_postgres]
path = "users.db"  # replica SQLite database; writes go here
```

## Endpoints

Routes are served under `/v1`. Each request is given a fresh request id.

| Method | Path              | Success status |
|--------|-------------------|----------------|
| GET    | `/v1/users/<user>` | 200           |
| POST   | `/v1/users`        | 201           |
| PUT    | `/v1/users/<user>` | 200           |
| GET    | `/health`          | 200 (`{"status": "ok"}`) |

A request body must be a JSON object with a non-empty string `user_name`.
It may also hold the strings `first_name`, `last_name`, `email` and
`status`. If `email` is present, it must look like an e-mail address. A body
that fails these checks gets a 400 response. Responses always carry `id` and
`user_name`. They carry `partner_id`, `total`, `first_name`, `last_name`,
`email` and `status` only when those fields are non-empty.

For PUT, the user name comes from the path, not from the body. The update is
validated, and the user must already exist.

Errors are returned as `{"error": "<message>"}`:

| Error kind    | Status |
|---------------|--------|
| not found     | 404    |
| validation    | 400    |
| unauthorized  | 401    |
| forbidden     | 403    |
| internal      | 500    |

Internal errors and unclassified errors always report
`Internal server error` in place of their own message.

## Using the layers directly

```python
from userservice.repository import open_database, SqlUserRepository
from userservice.rules import UserValidator
from userservice.usecase import UserUsecase
from userservice.facade import UserFacade
from userservice.dto import UserRequest

db = open_database(":memory:")  # creates the user_tbl table
repo = SqlUserRepository(db, db)
facade = UserFacade(UserUsecase(repo, UserValidator()))

facade.create_user(UserRequest.from_dict({"user_name": "alice"}))
print(facade.get_user("alice").to_dict())
```

## Limitations

- `SqlUserRepository.store` always inserts a new row with a freshly
  generated id. It stores only the user name. It returns the user it was
  given, so a create or update response does not contain the generated id
  or any stored data.
- An update inserts another row. It does not modify the existing one.
- Reads go to the main database and writes go to the replica. When the two
  are different files, newly stored users are not visible to reads.
- `ConsumerInfo` is defined but nothing in the service uses it.
- There is no authentication. No error of the `UNAUTHORIZED` or `FORBIDDEN`
  kind is raised anywhere.