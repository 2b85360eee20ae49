def test_categories_list_sorted_by_name(client, make_category):
	make_category("Printer")
	make_category("Network")

	resp = client.get("/categories")
	assert resp.status_code == 200
	assert [c["name"] for c in resp.get_json()] == ["Network", "Printer"]


def test_category_create_and_update(client):
	created = client.post("/categories", json={"name": "Workstation"})
	assert created.status_code == 201
	body = created.get_json()
	assert body["name"] == "Workstation"
	assert isinstance(body["id"], int)

	updated = client.put(f"/categories/{body['id']}", json={"name": "Laptops"})
	assert updated.status_code == 200
	assert updated.get_json() == {"id": body["id"], "name": "Laptops"}


def test_category_validation_and_not_found(client):
	blank = client.post("/categories", json={"name": "   "})
	assert blank.status_code == 400
	assert "error" in blank.get_json()

	missing = client.post("/categories", json={})
	assert missing.status_code == 400

	not_found = client.put("/categories/9999", json={"name": "Ghost"})
	assert not_found.status_code == 404
	assert not_found.get_json() == {"error": "Category not found"}


def test_category_has_no_delete_route(client, make_category):
	cat = make_category("Network")
	resp = client.delete(f"/categories/{cat.id}")
	assert resp.status_code == 405


def test_issue_create_then_list_by_category_once(client, make_category):
	network = make_category("Network")
	printer = make_category("Printer")

	resp = client.post("/issues", json={"description": "Paper jam", "category_id": printer.id})
	assert resp.status_code == 201
	assert resp.get_json()["description"] == "Paper jam"

	by_printer = client.get(f"/issues/category/{printer.id}").get_json()
	assert by_printer.count("Paper jam") == 1

	by_network = client.get(f"/issues/category/{network.id}").get_json()
	assert by_network == []


def test_issues_with_categories(client, make_category, make_issue):
	cat = make_category("Network")
	issue = make_issue(cat, "Slow Wi-Fi")

	resp = client.get("/issues/with-categories")
	assert resp.status_code == 200
	assert resp.get_json() == [
		{"id": issue.id, "description": "Slow Wi-Fi", "category_id": cat.id, "category_name": "Network"}
	]


def test_issue_create_rejects_missing_fields_and_unknown_category(client, make_category):
	cat = make_category("Network")

	no_desc = client.post("/issues", json={"category_id": cat.id})
	assert no_desc.status_code == 400

	unknown = client.post("/issues", json={"description": "X", "category_id": 9999})
	assert unknown.status_code == 400

	assert client.get("/issues").get_json() == []


def test_issue_update_and_not_found(client, make_category, make_issue):
	cat = make_category("Network")
	other = make_category("Printer")
	issue = make_issue(cat, "Old text")

	resp = client.put(f"/issues/{issue.id}", json={"description": "New text", "category_id": other.id})
	assert resp.status_code == 200
	assert resp.get_json() == {"id": issue.id, "description": "New text", "category_id": other.id}

	missing = client.put("/issues/9999", json={"description": "x", "category_id": cat.id})
	assert missing.status_code == 404


def test_issue_delete(client, make_category, make_issue):
	cat = make_category("Network")
	issue = make_issue(cat, "Temporary")

	resp = client.delete(f"/issues/{issue.id}")
	assert resp.status_code == 204
	assert resp.data == b""

	again = client.delete(f"/issues/{issue.id}")
	assert again.status_code == 404


def test_issue_delete_rejected_while_referenced(client, lookups, make_report):
	make_report()
	issue_id = lookups["issue"].id

	resp = client.delete(f"/issues/{issue_id}")
	assert resp.status_code == 400

	listed = client.get("/reports").get_json()
	assert len(listed) == 1
	assert listed[0]["issue_id"] == issue_id


def test_solutions_use_desc_on_the_wire(client, make_category):
	cat = make_category("Printer")

	resp = client.post("/solutions", json={"desc": "Cleared paper path", "category_id": cat.id})
	assert resp.status_code == 201
	body = resp.get_json()
	assert body["desc"] == "Cleared paper path"
	assert "description" not in body

	listed = client.get("/solutions").get_json()
	assert [s["desc"] for s in listed] == ["Cleared paper path"]

	by_cat = client.get(f"/solutions/category/{cat.id}").get_json()
	assert by_cat == ["Cleared paper path"]

	joined = client.get("/solutions/with-categories").get_json()
	assert joined[0]["category_name"] == "Printer"
	assert joined[0]["desc"] == "Cleared paper path"


def test_solution_update_not_found_and_no_delete(client, make_category, make_solution):
	cat = make_category("Printer")
	sol = make_solution(cat, "Reinstalled driver")

	ok = client.put(f"/solutions/{sol.id}", json={"desc": "Updated driver", "category_id": cat.id})
	assert ok.status_code == 200
	assert ok.get_json()["desc"] == "Updated driver"

	missing = client.put("/solutions/9999", json={"desc": "x", "category_id": cat.id})
	assert missing.status_code == 404

	assert client.delete(f"/solutions/{sol.id}").status_code == 405
