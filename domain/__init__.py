"""Describes the meal browser domain. Centres around the `ViewStateController`.

Why is this not hard?

- The recipes live behind TheMealDB. We only read them, two endpoints.
- No storage, no caching. A reload asks the api again.
- The one thing with invariants is which view is showing, and what happens
  when two fetches overlap.

The api client is injected, so it can be faked with a mock transport.
"""
