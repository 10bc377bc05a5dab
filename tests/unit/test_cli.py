from researcher_graph import cli


CSV = (
    "id,name,affiliation,program,theme,field,keywords,keytechnology\n"
    "1,Aoki,Kumamoto Univ.,,,免疫学関連,HIV,\n"
    "2,Baba,Kyoto Univ.,,,免疫学関連,,\n"
    "3,Chiba,Osaka Univ.,,,ウイルス学関連,HIV,\n"
)


def write_csv(tmp_path):
    path = tmp_path / "researchers.csv"
    path.write_text(CSV, encoding="utf-8")
    return path


def test_visualize_writes_html(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    src = write_csv(tmp_path)
    out = tmp_path / "dist" / "index.html"
    assert cli.main(["visualize", "-i", str(src), "-o", str(out)]) == 0
    html = out.read_text(encoding="utf-8")
    assert "Chiba" in html


def test_related_lists_ranked_peers(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    src = write_csv(tmp_path)
    assert cli.main(["related", "1", "-i", str(src)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Aoki (1)"
    assert "Baba" in lines[1] and "3" in lines[1]
    assert "Chiba" in lines[2]


def test_related_unknown_id(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    src = write_csv(tmp_path)
    assert cli.main(["related", "42", "-i", str(src)]) == 1
