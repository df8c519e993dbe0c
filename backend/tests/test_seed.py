from sitetrack.crud.projects import list_projects
from sitetrack.db.models.equipment import Equipment
from sitetrack.db.models.material import Material
from sitetrack.db.models.worker import Worker
from sitetrack.services.seed import seed_demo


def test_seed_demo_populates_empty_store(session_factory, client):
    with session_factory() as s:
        assert seed_demo(s) is True
        assert seed_demo(s) is False
        assert len(list_projects(s)) == 2
        assert s.query(Material).count() == 2
        assert s.query(Equipment).count() == 2
        assert s.query(Worker).count() == 2

    rows = {x["name"]: x for x in client.get("/api/projects").json()}
    tower = rows["ABC High-rise Building"]
    assert tower["status"] == "IN_PROGRESS"
    assert tower["work_item_count"] == 2
    # (150 + 0) / (500 + 300)
    assert tower["completionPercentage"] == 18.75
    assert rows["XYZ Residential Area"]["status"] == "PLANNING"

    detail = client.get(f"/api/projects/{tower['id']}").json()
    assert detail["completionPercentage"] == 18.75
