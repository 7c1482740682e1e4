"""Shared test fixtures for gql-explorer tests."""

from __future__ import annotations

from graphql import GraphQLSchema, build_schema
import pytest

SDL = """
type Query {
  user(id: ID!): User
  users(first: Int, filter: UserFilter): [User!]!
  post(id: ID!): Post
  search(term: String!, limit: Int! = 10): [User]
  version: String
}

type Mutation {
  createUser(input: CreateUserInput!): User
}

type Subscription {
  userCreated: User
}

type User {
  id: ID!
  name: String
  role: Role
  friends: [User]
  address: Address
}

type Address {
  city: String
  country: Country
}

type Country {
  code: String
}

type Post {
  title: String
  author: User
}

enum Role {
  ADMIN
  MEMBER
}

scalar DateTime

input UserFilter {
  role: Role
  name: String
  createdAfter: DateTime
  and: UserFilter
}

input CreateUserInput {
  name: String!
  age: Int
  score: Float
  active: Boolean
  tags: [String!]
  role: Role!
}
"""

# Eight nested levels, deeper than the recursive expansion goes.
CHAIN_SDL = "type Query { l1: L1 }\n" + "\n".join(
    f"type L{i} {{ v: String next: L{i + 1} }}" for i in range(1, 8)
) + "\ntype L8 { v: String }\n"


@pytest.fixture
def schema() -> GraphQLSchema:
    return build_schema(SDL)


@pytest.fixture
def chain_schema() -> GraphQLSchema:
    return build_schema(CHAIN_SDL)
