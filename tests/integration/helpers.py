def graphql(client, query: str, variables=None) -> dict:
    """POST a GraphQL operation and return the decoded response body."""
    response = client.post("/graphql", json={"query": query, "variables": variables or {}})
    return response.json()
