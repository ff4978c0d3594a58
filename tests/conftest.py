import pytest

from postbayes import NaiveBayesClassifier


@pytest.fixture
def classifier():
    return NaiveBayesClassifier()


@pytest.fixture
def card_classifier():
    classifier = NaiveBayesClassifier()
    classifier.ingest("exam", "study hard")
    classifier.ingest("euchre", "play cards")
    return classifier


@pytest.fixture
def train_csv(tmp_path):
    path = tmp_path / "train.csv"
    path.write_text(
        "n,tag,content\n"
        "1,euchre,can the upcard ever be the left bower\n"
        "2,euchre,when would the dealer ever prefer a card\n"
        "3,calculator,error in calculator include file\n"
        "4,euchre,how is the winning team determined in euchre\n"
        "5,calculator,can we use the friend class\n"
    )
    return path


@pytest.fixture
def test_csv(tmp_path):
    path = tmp_path / "test.csv"
    path.write_text(
        "n,tag,content\n"
        "1,euchre,my code segfaults when the dealer adds the upcard\n"
        "2,calculator,does stack need its own include file\n"
    )
    return path
