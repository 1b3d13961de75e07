def test_traceparent_header(client):
    resp = client.get("/__ok")
    assert resp.status_code == 200
    assert "traceparent" in resp.headers


def test_incoming_trace_is_continued(client):
    trace_id = "4bf92f3577b34da6a3ce929d0e0e4736"
    resp = client.get(
        "/__ok",
        headers={"traceparent": f"00-{trace_id}-00f067aa0ba902b7-01"},
    )
    assert resp.headers["traceparent"].split("-")[1] == trace_id
