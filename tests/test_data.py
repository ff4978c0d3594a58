import json

import pytest

from postbayes.data import load_posts, split_posts


def test_load_csv(train_csv):
    df = load_posts(str(train_csv))

    assert list(df.columns) == ["label", "content"]
    assert len(df) == 5
    assert df["label"].tolist()[:3] == ["euchre", "euchre", "calculator"]
    assert df["content"][2] == "error in calculator include file"


def test_load_csv_keeps_blank_cells(tmp_path):
    path = tmp_path / "blank.csv"
    path.write_text("tag,content\n,hello there\nsports,\n")

    df = load_posts(str(path))

    assert df["label"].tolist() == ["", "sports"]
    assert df["content"].tolist() == ["hello there", ""]


def test_load_custom_columns(tmp_path):
    path = tmp_path / "news.csv"
    path.write_text("category,headline\npolitics,vote today\n")

    df = load_posts(str(path), label_column="category", content_column="headline")

    assert df.to_dict("records") == [{"label": "politics", "content": "vote today"}]


def test_load_json_lines_skips_bad_lines(tmp_path):
    path = tmp_path / "posts.jsonl"
    lines = [
        json.dumps({"tag": "exam", "content": "study hard"}),
        "{not json",
        "",
        json.dumps({"tag": "euchre", "content": "play cards", "extra": 1}),
    ]
    path.write_text("\n".join(lines) + "\n")

    df = load_posts(str(path))

    assert df["label"].tolist() == ["exam", "euchre"]
    assert df["content"].tolist() == ["study hard", "play cards"]


def test_missing_column(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("tag,text\na,b\n")

    with pytest.raises(ValueError, match="content"):
        load_posts(str(path))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_posts(str(tmp_path / "nope.csv"))


def test_split_posts(train_csv):
    df = load_posts(str(train_csv))

    train_df, test_df = split_posts(df, test_size=0.4)

    assert len(train_df) + len(test_df) == len(df)
    assert sorted(train_df["content"].tolist() + test_df["content"].tolist()) == \
        sorted(df["content"].tolist())
    assert set(test_df["label"]) == {"euchre", "calculator"}


def test_load_accepts_path_objects(train_csv):
    df = load_posts(train_csv)

    assert len(df) == 5


def test_load_upper_case_json_extension(tmp_path):
    path = tmp_path / "POSTS.JSON"
    path.write_text(json.dumps({"tag": "exam", "content": "study hard"}) + "\n")

    df = load_posts(path)

    assert df.to_dict("records") == [{"label": "exam", "content": "study hard"}]
