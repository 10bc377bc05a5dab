from researcher_graph.data.loaders import load_researchers


CSV = (
    "id,name,affiliation,program,theme,field,keywords,keytechnology\n"
    "1,Aoki,Kumamoto Univ.,P1,HIV latency,\"免疫学関連,ウイルス学関連\",\"HIV, T cell\",CRISPR\n"
    "2,Baba,,,,免疫学関連,,\n"
    "\n"
)


def test_load_researchers_reads_rows_as_strings(tmp_path):
    path = tmp_path / "researchers.csv"
    path.write_text(CSV, encoding="utf-8")
    records = load_researchers(path)
    assert [r.id for r in records] == ["1", "2"]
    first = records[0]
    assert first.field == "免疫学関連,ウイルス学関連"
    assert first.keywords == "HIV, T cell"
    assert records[1].affiliation == ""
    assert records[1].keytechnology == ""


def test_missing_columns_become_empty(tmp_path):
    path = tmp_path / "partial.csv"
    path.write_text("id,name,field\n7,Chiba,免疫学関連\n", encoding="utf-8")
    records = load_researchers(path)
    assert records[0].id == "7"
    assert records[0].keywords == ""
    assert records[0].program == ""


def test_missing_file_yields_empty_list(tmp_path, caplog):
    records = load_researchers(tmp_path / "nope.csv")
    assert records == []
    assert "not found" in caplog.text


def test_empty_file_yields_empty_list(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    assert load_researchers(path) == []
