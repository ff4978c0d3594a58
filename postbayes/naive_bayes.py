from collections import defaultdict, Counter

import numpy as np

from postbayes.tokenizer import unique_words


class NaiveBayesClassifier:
    """
    Bag-of-words Naive Bayes classifier for short posts.
    Words are counted by document frequency: a word repeated in a post
    counts once for that post, at training and at prediction time.
    """

    def __init__(self):
        self._total_posts = 0
        self._vocabulary = set()
        self._word_counts = Counter()
        self._label_counts = Counter()
        self._label_word_counts = defaultdict(Counter)
        self._training_data = []

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------
    def ingest(self, label, content):
        """Add a single labeled post to the frequency tables."""
        self._total_posts += 1
        self._label_counts[label] += 1
        self._training_data.append((label, content))

        for word in unique_words(content):
            self._vocabulary.add(word)
            self._word_counts[word] += 1
            self._label_word_counts[label][word] += 1

    def fit(self, X, y):
        """Train the classifier on parallel sequences of posts and labels."""
        if len(X) != len(y):
            raise ValueError(f"Got {len(X)} posts but {len(y)} labels")

        n_samples = len(y)
        print(f"Processing {n_samples} training documents...")
        for idx, (content, label) in enumerate(zip(X, y)):
            if (idx + 1) % 5000 == 0:
                print(f"  Processed {idx + 1}/{n_samples} documents ({100*(idx+1)/n_samples:.1f}%)")
            self.ingest(label, content)
        print(f"  Completed: {n_samples}/{n_samples} documents")
        print(f"Vocabulary size: {self.vocabulary_size}")
        print(f"Labels: {len(self._label_counts)}")
        return self

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def total_posts(self):
        return self._total_posts

    @property
    def vocabulary(self):
        return frozenset(self._vocabulary)

    @property
    def vocabulary_size(self):
        return len(self._vocabulary)

    @property
    def labels(self):
        return sorted(self._label_counts)

    @property
    def label_counts(self):
        return dict(self._label_counts)

    @property
    def word_counts(self):
        return dict(self._word_counts)

    @property
    def label_word_counts(self):
        return {label: dict(words) for label, words in self._label_word_counts.items()}

    @property
    def training_data(self):
        return list(self._training_data)

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------
    def _check_trained(self):
        if self._total_posts == 0:
            raise ValueError("classifier has not been trained")

    def log_prior(self, label):
        """Log of the fraction of training posts carrying label."""
        self._check_trained()
        return float(np.log(self._label_counts[label] / self._total_posts))

    def log_likelihood(self, label, word):
        """
        Estimate ln P(word | label).

        Falls back from the label's own document frequency to the
        corpus-wide document frequency, and from there to one post out of
        the whole training set for words never seen at all.
        """
        self._check_trained()

        # .get avoids inserting empty entries into the defaultdict
        count = self._label_word_counts.get(label, {}).get(word, 0)
        if count > 0:
            return float(np.log(count / self._label_counts[label]))

        # Word not seen with this label: use corpus-wide frequency
        global_count = self._word_counts.get(word, 0)
        if global_count > 0:
            return float(np.log(global_count / self._total_posts))

        # Word not seen anywhere
        return float(np.log(1 / self._total_posts))

    def score_labels(self, content):
        """Log-probability score of content under every trained label."""
        self._check_trained()
        words = sorted(unique_words(content))

        class_scores = {}
        for label in self._label_counts:
            score = self.log_prior(label)
            for word in words:
                score += self.log_likelihood(label, word)
            class_scores[label] = score
        return class_scores

    def predict(self, content):
        """Return the best label for content and its log-probability score."""
        class_scores = self.score_labels(content)

        best_label, best_score = None, -np.inf
        # Equal scores go to the lexicographically smaller label
        for label in sorted(class_scores):
            if class_scores[label] > best_score:
                best_label, best_score = label, class_scores[label]
        return best_label, best_score

    def predict_all(self, X):
        """Predict labels for a sequence of posts."""
        self._check_trained()
        print(f"Making predictions on {len(X)} test documents...")
        predictions = []
        for idx, content in enumerate(X):
            if (idx + 1) % 5000 == 0:
                print(f"  Predicted {idx + 1}/{len(X)} documents ({100*(idx+1)/len(X):.1f}%)")
            label, _ = self.predict(content)
            predictions.append(label)
        print(f"  Completed: {len(X)}/{len(X)} documents")
        return predictions
