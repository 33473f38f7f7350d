"""
Data package.

- models: venue/review/booking records and domain errors
- catalog: in-memory filter/sort/search
- api_client: FakeStore product feed over HTTP
- transform: product feed -> venue records
- service: the only entry point views use (mock/live fallback)
"""
