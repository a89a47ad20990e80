import asyncio
import json

import httpx

from devfolio.core.github_client import (
    GITHUB_GRAPHQL_URL,
    GitHubGraphQLClient,
    extract_graphql_errors,
)


def test_execute_posts_query_with_bearer_token():
    async def run_test() -> None:
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={"data": {}})

        async with GitHubGraphQLClient(
            access_token="ghp_test", transport=httpx.MockTransport(handler)
        ) as client:
            response = await client.execute("query { viewer { login } }", {"x": 1})

        assert response.status_code == 200
        request = captured[0]
        assert request.method == "POST"
        assert str(request.url) == GITHUB_GRAPHQL_URL
        assert request.headers["Authorization"] == "Bearer ghp_test"
        assert json.loads(request.content) == {
            "query": "query { viewer { login } }",
            "variables": {"x": 1},
        }

    asyncio.run(run_test())


def test_no_authorization_header_without_token():
    async def run_test() -> None:
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={})

        client = GitHubGraphQLClient(
            access_token="",
            endpoint="https://github.example.com/api/graphql",
            transport=httpx.MockTransport(handler),
        )
        await client.execute("query { viewer { login } }")
        await client.close()

        assert "Authorization" not in captured[0].headers
        assert captured[0].url.host == "github.example.com"
        assert json.loads(captured[0].content)["variables"] == {}

    asyncio.run(run_test())


def test_extract_graphql_errors():
    payload = {"errors": [{"message": "Could not resolve"}, "raw"]}

    assert extract_graphql_errors(payload) == ["Could not resolve", "raw"]
    assert extract_graphql_errors({"data": {}}) == []
    assert extract_graphql_errors(None) == []
