from sizer.core.volume import TableSizing, estimate_tables, render_markdown, report_to_dict


def _report():
    return estimate_tables([
        TableSizing("SALES_FACT", 2 * 1024 ** 3, 1),
        TableSizing("CUSTOMER_DIM", 1024 ** 3, 0.5),
    ])


def test_markdown_table_layout():
    md = render_markdown(_report())
    lines = md.strip().splitlines()
    assert lines[0] == "| Table | Rows | Avg row size (KB) | Volume |"
    assert lines[1].startswith("|---")
    assert lines[2] == "| SALES_FACT | 2,147,483,648 | 1 | 2.00 TB |"
    assert lines[3] == "| CUSTOMER_DIM | 1,073,741,824 | 0.5 | 0.50 TB |"
    assert lines[4].startswith("| **Total** | **3,221,225,472** |")
    assert lines[4].endswith("| **2.50 TB** |")


def test_markdown_precision():
    md = render_markdown(_report(), precision=0)
    assert "| 2 TB |" in md


def test_report_to_dict_shape():
    body = report_to_dict(_report())
    assert [t["name"] for t in body["tables"]] == ["SALES_FACT", "CUSTOMER_DIM"]
    assert body["tables"][0]["unit"] == "TB"
    assert body["total"]["total_tb"] == 2.5
    assert body["total"]["unit"] == "TB"
    assert body["total"]["rows"] == 3 * 1024 ** 3
