"""
Example of using netforge from blocking code.
"""

from netforge import Request, SyncSession

if __name__ == "__main__":
    with SyncSession(base_url="https://httpbin.org") as session:
        resp = session.send(Request("/get", "GET", query_params={"q": "swift", "limit": "10"}))
        print(f"Status: {resp.status_code}")
        print(f"Response: {resp.json()}")

        resp2 = session.send(Request.json("/post", "POST", {"test": "data"}))
        print(f"POST Status: {resp2.status_code}")
        print(f"POST Response: {resp2.decode(dict)}")

        resp3 = session.send(Request("/bytes/16", "GET"))
        print(f"Binary as text: {resp3.body_as_text!r}")
