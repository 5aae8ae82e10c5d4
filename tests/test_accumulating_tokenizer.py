from tokenizador.accumulating_tokenizer import AccumulatingTokenizer


def test_tokenize_into_appends():
    tokens = ["previo"]
    result = AccumulatingTokenizer(" ").tokenize_into("MS DOS", tokens)
    assert result is tokens
    assert tokens == ["previo", "MS", "DOS"]


def test_tokenize_into_accumulates_over_calls():
    tokenizer = AccumulatingTokenizer(". /")
    tokens: list[str] = []
    tokenizer.tokenize_into("MS DOS", tokens)
    tokenizer.tokenize_into("OS/2", tokens)
    assert tokens == tokenizer.tokenize("MS DOS OS/2")


def test_tokenize_into_empty_text_leaves_list():
    tokens = ["a"]
    AccumulatingTokenizer(" ").tokenize_into("   ", tokens)
    assert tokens == ["a"]


def test_tokenize_file_repeats_gathered_tokens(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("a b\n\nc\n", encoding="utf-8")
    assert AccumulatingTokenizer().tokenize_file(str(source), str(target)) is True
    assert target.read_text(encoding="utf-8").splitlines() == ["a", "b", "a", "b", "c"]


def test_file_list_skips_first_line_and_cuts_at_dot(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "doc.txt").write_text("uno dos\n", encoding="utf-8")
    (tmp_path / "lista").write_text("cabecera\ndoc.txt\n", encoding="utf-8")
    assert AccumulatingTokenizer().tokenize_file_list("lista") is True
    assert (tmp_path / "doc.tk").read_text(encoding="utf-8").split() == ["uno", "dos"]
    assert not (tmp_path / "doc.txt.tk").exists()


def test_file_list_header_only(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "doc.txt").write_text("uno\n", encoding="utf-8")
    (tmp_path / "lista").write_text("doc.txt\n", encoding="utf-8")
    assert AccumulatingTokenizer().tokenize_file_list("lista") is True
    assert not (tmp_path / "doc.tk").exists()


def test_file_list_reads_unterminated_last_line(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "doc.txt").write_text("uno\n", encoding="utf-8")
    (tmp_path / "lista").write_text("cabecera\ndoc.txt", encoding="utf-8")
    assert AccumulatingTokenizer().tokenize_file_list("lista") is True
    assert (tmp_path / "doc.tk").exists()


def test_file_list_missing_entry(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "lista").write_text("cabecera\nausente.txt\n", encoding="utf-8")
    assert AccumulatingTokenizer().tokenize_file_list("lista") is False


def test_missing_file_list(tmp_path):
    assert AccumulatingTokenizer().tokenize_file_list(str(tmp_path / "nada")) is False


def test_directory_of_files(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    corpus = tmp_path / "corpus"
    corpus.mkdir()
    (corpus / "a.txt").write_text("uno\n", encoding="utf-8")
    assert AccumulatingTokenizer().tokenize_directory("corpus") is True
    assert (corpus / "a.tk").read_text(encoding="utf-8").split() == ["uno"]


def test_directory_with_subdirectory_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    corpus = tmp_path / "corpus"
    (corpus / "sub").mkdir(parents=True)
    (corpus / "a.txt").write_text("uno\n", encoding="utf-8")
    assert AccumulatingTokenizer().tokenize_directory("corpus") is False
    assert (corpus / "a.tk").exists()


def test_directory_rejects_missing(tmp_path):
    assert AccumulatingTokenizer().tokenize_directory(str(tmp_path / "absent")) is False