import io
from datetime import datetime

from openpyxl import load_workbook


XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _sheet(resp):
	return load_workbook(io.BytesIO(resp.data)).active


def test_export_selected_reports(client, make_report):
	first = make_report(
		when=datetime(2024, 5, 1, 9, 30),
		notes="Checked cables",
		status="escalate",
		priority="high",
		escalate_name="Network team",
		pic_name2="/uploads/x.jpg",
	)
	second = make_report(when=datetime(2024, 5, 2, 14, 5))
	make_report(when=datetime(2024, 5, 3, 8, 0))

	resp = client.post("/export-reports-excel", json={"ids": [first.id, second.id]})
	assert resp.status_code == 200
	assert resp.mimetype == XLSX
	assert "attachment" in resp.headers["Content-Disposition"]
	assert ".xlsx" in resp.headers["Content-Disposition"]

	ws = _sheet(resp)
	rows = list(ws.iter_rows(values_only=True))
	assert rows[0][:3] == ("ID", "Date", "Category")
	assert len(rows) == 1 + 2

	# Newest first
	assert rows[1][0] == second.id
	assert rows[2] == (
		first.id,
		"01.05.2024 09:30",
		"Network",
		"No connection",
		"Restarted router",
		"escalate",
		"high",
		"Network team",
		"Checked cables",
		"No",
		"Yes",
		"No",
	)


def test_export_counts_only_resolved_ids(client, make_report):
	report = make_report()

	resp = client.post("/export-reports-excel", json={"ids": [report.id, 9999]})
	assert resp.status_code == 200
	assert _sheet(resp).max_row == 2


def test_export_unknown_ids_is_404(client, make_report):
	make_report()
	resp = client.post("/export-reports-excel", json={"ids": [3000, 7000]})
	assert resp.status_code == 404
	assert "error" in resp.get_json()


def test_export_requires_ids(client):
	assert client.post("/export-reports-excel", json={"ids": []}).status_code == 400
	assert client.post("/export-reports-excel", json={}).status_code == 400
	assert client.post("/export-reports-excel", json={"ids": ["a"]}).status_code == 400
