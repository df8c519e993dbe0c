import time

import pytest

from sitetrack.crud.work_items import get_work_item
from sitetrack.db.models.work_item import WorkItem


def _set_completed(session_factory, work_item_id, qty):
    # there is no endpoint for progress; write to the store directly
    with session_factory() as s:
        wi = get_work_item(s, work_item_id)
        wi.completed_quantity = qty
        s.commit()


def test_create_work_item_defaults(client, make_project):
    p = make_project()
    r = client.post(
        f"/api/projects/{p['id']}/work-items",
        json={"name": "Excavation", "unit": "m3", "designQuantity": "100", "unitPrice": "50.5"},
    )
    assert r.status_code == 201
    wi = r.json()
    assert wi["project_id"] == p["id"]
    assert wi["design_quantity"] == 100.0
    assert wi["unit_price"] == 50.5
    assert wi["completed_quantity"] == 0
    assert wi["status"] == "NOT_STARTED"
    assert wi["description"] is None
    assert wi["created_at"] == wi["updated_at"]


@pytest.mark.parametrize("missing", ["name", "unit", "designQuantity", "unitPrice"])
def test_create_work_item_requires_fields(client, session_factory, make_project, missing):
    p = make_project()
    body = {"name": "Excavation", "unit": "m3", "designQuantity": 100, "unitPrice": 50}
    body.pop(missing)
    r = client.post(f"/api/projects/{p['id']}/work-items", json=body)
    assert r.status_code == 400
    assert missing in r.json()["error"]
    with session_factory() as s:
        assert s.query(WorkItem).count() == 0


def test_create_work_item_rejects_negative_quantities(client, make_project):
    p = make_project()
    r = client.post(
        f"/api/projects/{p['id']}/work-items",
        json={"name": "Excavation", "unit": "m3", "designQuantity": -1, "unitPrice": 50},
    )
    assert r.status_code == 400


def test_zero_quantities_are_accepted(client, make_project, make_work_item):
    p = make_project()
    wi = make_work_item(p["id"], designQuantity=0, unitPrice=0)
    assert wi["design_quantity"] == 0
    assert client.get(f"/api/projects/{p['id']}").json()["completionPercentage"] == 0


def test_list_work_items_in_creation_order(client, make_project, make_work_item):
    p = make_project()
    a = make_work_item(p["id"], name="A")
    time.sleep(0.002)
    b = make_work_item(p["id"], name="B")
    other = make_project(name="Other")
    make_work_item(other["id"], name="C")

    r = client.get(f"/api/projects/{p['id']}/work-items")
    assert r.status_code == 200
    assert [x["id"] for x in r.json()] == [a["id"], b["id"]]


def test_list_work_items_of_unknown_project_is_empty(client):
    r = client.get("/api/projects/missing/work-items")
    assert r.status_code == 200
    assert r.json() == []


def test_site_a_end_to_end(client, session_factory):
    p = client.post("/api/projects", json={"name": "Site A"}).json()
    wi = client.post(
        f"/api/projects/{p['id']}/work-items",
        json={"name": "Excavation", "unit": "m3", "designQuantity": 100, "unitPrice": 50},
    ).json()
    assert wi["completed_quantity"] == 0

    detail = client.get(f"/api/projects/{p['id']}").json()
    assert detail["completionPercentage"] == 0

    _set_completed(session_factory, wi["id"], 50)

    detail = client.get(f"/api/projects/{p['id']}").json()
    assert detail["completionPercentage"] == 50.00
    assert detail["workItems"][0]["completed_quantity"] == 50
    listed = client.get("/api/projects").json()
    assert listed[0]["completionPercentage"] == 50.00
    assert listed[0]["total_completed_quantity"] == 50


@pytest.mark.parametrize(
    "quantities",
    [
        [(3, 1)],
        [(100, 33.3), (250, 17), (0.7, 0.1)],
        [(10, 15)],
        [(1, 0), (2, 0), (3, 0)],
    ],
)
def test_list_and_detail_agree(client, session_factory, make_project, make_work_item, quantities):
    p = make_project()
    for design, completed in quantities:
        wi = make_work_item(p["id"], designQuantity=design)
        _set_completed(session_factory, wi["id"], completed)

    detail = client.get(f"/api/projects/{p['id']}").json()["completionPercentage"]
    listed = next(x for x in client.get("/api/projects").json() if x["id"] == p["id"])["completionPercentage"]
    assert detail == listed
    assert detail == round(detail, 2)


def test_status_is_not_derived_from_quantities(client, session_factory, make_project, make_work_item):
    p = make_project()
    wi = make_work_item(p["id"])
    _set_completed(session_factory, wi["id"], 100)
    items = client.get(f"/api/projects/{p['id']}/work-items").json()
    assert items[0]["completed_quantity"] == 100
    assert items[0]["status"] == "NOT_STARTED"
