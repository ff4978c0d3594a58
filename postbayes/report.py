import pandas as pd
import matplotlib
matplotlib.use('Agg')  # Non-interactive backend for terminal
import matplotlib.pyplot as plt
import seaborn as sns
from sklearn.metrics import accuracy_score, precision_recall_fscore_support, confusion_matrix


def _fmt(value):
    return f"{value:.3g}"


def print_training_data(classifier):
    """Print every training post followed by corpus statistics."""
    print("training data:")
    for label, content in classifier.training_data:
        print(f"  label = {label}, content = {content}")
    print(f"trained on {classifier.total_posts} examples")
    print(f"vocabulary size = {classifier.vocabulary_size}")
    print()


def print_classifier_parameters(classifier):
    """Print log-priors per label and log-likelihoods per (label, word)."""
    label_counts = classifier.label_counts

    print("classes:")
    for label in classifier.labels:
        print(f"  {label}, {label_counts[label]} examples, "
              f"log-prior = {_fmt(classifier.log_prior(label))}")

    print("classifier parameters:")
    label_word_counts = classifier.label_word_counts
    for label in sorted(label_word_counts):
        for word, count in sorted(label_word_counts[label].items()):
            log_likelihood = classifier.log_likelihood(label, word)
            print(f"  {label}:{word}, count = {count}, "
                  f"log-likelihood = {_fmt(log_likelihood)}")
    print()


def print_predictions(classifier, df):
    """
    Predict every row of df and print the outcome per post.

    Returns the predicted labels in row order.
    """
    print(f"trained on {classifier.total_posts} examples")
    print()
    print("test data:")

    predictions = []
    correct = 0
    for true_label, content in zip(df['label'], df['content']):
        predicted_label, score = classifier.predict(content)
        predictions.append(predicted_label)
        if predicted_label == true_label:
            correct += 1

        print(f"  correct = {true_label}, predicted = {predicted_label}, "
              f"log-probability score = {_fmt(score)}")
        print(f"  content = {content}")
        print()

    print(f"performance: {correct} / {len(predictions)} posts predicted correctly")
    print()
    return predictions


def _display_label(label):
    # Blank labels would otherwise render as an empty cell
    return label if label else "''"


def plot_confusion_matrix(y_true, y_pred, classes, save_path='confusion_matrix.png'):
    """Plot and save a confusion matrix of true against predicted post labels."""
    cm = confusion_matrix(y_true, y_pred, labels=classes)
    names = [_display_label(cls) for cls in classes]

    n_classes = len(classes)
    figsize = (max(8, n_classes * 0.6), max(6, n_classes * 0.5))

    plt.figure(figsize=figsize)
    sns.heatmap(cm, annot=True, fmt='d', cmap='Blues',
                xticklabels=names, yticklabels=names,
                cbar_kws={'label': 'Posts'})
    plt.title(f'Confusion Matrix - {len(y_true)} Test Posts', fontsize=14, pad=15)
    plt.ylabel('Correct Label', fontsize=11)
    plt.xlabel('Predicted Label', fontsize=11)
    plt.xticks(rotation=45, ha='right')
    plt.yticks(rotation=0)
    plt.tight_layout()
    plt.savefig(save_path, dpi=150, bbox_inches='tight')
    print(f"\nConfusion matrix saved to: {save_path}")
    plt.close()


def evaluate_classifier(y_true, y_pred, classes, save_path=None):
    """
    Summarize prediction quality per label.

    Returns a dict with the headline scores and a 'per_label' DataFrame
    indexed by label. The table is also written to save_path when given.
    """
    precision, recall, f1, support = precision_recall_fscore_support(
        y_true, y_pred, labels=classes, average=None, zero_division=0
    )
    per_label = pd.DataFrame({
        'precision': precision,
        'recall': recall,
        'f1': f1,
        'posts': support,
        'predicted': [sum(1 for p in y_pred if p == cls) for cls in classes],
    }, index=pd.Index(classes, name='label'))

    accuracy = accuracy_score(y_true, y_pred)
    misclassified = sum(1 for t, p in zip(y_true, y_pred) if t != p)

    table = per_label.rename(index=_display_label).to_string(float_format=lambda v: f"{v:.4f}")
    output_lines = [
        "="*80,
        "EVALUATION METRICS",
        "="*80,
        f"Accuracy: {accuracy:.4f} ({len(y_true) - misclassified} / {len(y_true)} posts)",
        f"Macro F1: {per_label['f1'].mean():.4f}",
        "-"*80,
        table,
        "="*80,
    ]
    print("\n" + "\n".join(output_lines))

    if save_path:
        with open(save_path, 'w') as f:
            f.write("\n".join(output_lines) + "\n")
        print(f"\nEvaluation metrics saved to: {save_path}")

    return {
        'accuracy': accuracy,
        'misclassified': misclassified,
        'precision_macro': per_label['precision'].mean(),
        'recall_macro': per_label['recall'].mean(),
        'f1_macro': per_label['f1'].mean(),
        'per_label': per_label,
    }
