"""
Pytest configuration and shared fixtures for migrast tests.
"""

import pytest

from migrast.ast import (
    CreateStmt,
    FieldDescriber,
    Literal,
    SqlTarget,
    TableBodyDescriber,
)

STATEMENTS_YAML = """\
statements:
  - kind: create
    target: schema
    name: billing
  - kind: create
    target: table
    name: billing.invoices
    if_not_exists: true
    create:
      kind: table_body
      fields:
        - name: id
          type: integer
          constraints: ["not null"]
        - name: customer_id
          type: integer
          constraints:
            - kind: references
              table: {container: public, name: customers}
              column: id
  - kind: insert
    table: billing.invoices
    values:
      - {field: id, value: 1}
      - {field: customer_id, value: 42}
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove migrast environment overrides so tests see file/default config."""
    for var in ("MIGRAST_DIALECT", "MIGRAST_VALIDATE", "MIGRAST_FORMAT", "MIGRAST_TERMINATOR"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def users_body():
    """Table body with two columns, a and b."""
    return TableBodyDescriber(
        (
            FieldDescriber("a", "integer", [Literal("not null")]),
            FieldDescriber("b", "text"),
        )
    )


@pytest.fixture
def create_users(users_body):
    """create table if not exists public.users (a integer not null, b text)"""
    return CreateStmt(
        target=SqlTarget.TABLE,
        name="public.users",
        create=users_body,
        if_not_exists=True,
    )


@pytest.fixture
def statements_file(tmp_path):
    """A YAML statement document on disk."""
    path = tmp_path / "statements.yaml"
    path.write_text(STATEMENTS_YAML)
    return path
