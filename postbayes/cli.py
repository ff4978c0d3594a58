import argparse

from postbayes.data import load_posts, split_posts
from postbayes.naive_bayes import NaiveBayesClassifier
from postbayes.report import (
    evaluate_classifier,
    plot_confusion_matrix,
    print_classifier_parameters,
    print_predictions,
    print_training_data,
)


def build_parser():
    parser = argparse.ArgumentParser(
        prog='postbayes',
        description='Train a Naive Bayes post classifier and optionally evaluate it.',
    )
    parser.add_argument('train_file', help='Training data (CSV or JSON lines)')
    parser.add_argument('test_file', nargs='?', help='Test data (CSV or JSON lines)')
    parser.add_argument('--test-size', type=float, default=None,
                        help='Hold out this fraction of the training file as test data')
    parser.add_argument('--label-column', default='tag')
    parser.add_argument('--content-column', default='content')
    parser.add_argument('--metrics', metavar='PATH',
                        help='Write evaluation metrics to PATH')
    parser.add_argument('--confusion-matrix', metavar='PATH',
                        help='Save a confusion matrix plot to PATH')
    return parser


def _load(path, args):
    try:
        return load_posts(path, label_column=args.label_column,
                          content_column=args.content_column)
    except (OSError, ValueError) as e:
        print(f"Error opening file: {path}")
        print(f"  {e}")
        return None


def main(argv=None):
    """Train on TRAIN_FILE; report parameters, or predict TEST_FILE."""
    args = build_parser().parse_args(argv)

    train_df = _load(args.train_file, args)
    if train_df is None:
        return 1

    if train_df.empty and (args.test_file or args.test_size is not None):
        print(f"Error: no training data in {args.train_file}")
        return 1

    test_df = None
    if args.test_file:
        test_df = _load(args.test_file, args)
        if test_df is None:
            return 1
    elif args.test_size is not None:
        try:
            train_df, test_df = split_posts(train_df, test_size=args.test_size)
        except ValueError as e:
            print(f"Error: cannot hold out --test-size {args.test_size}")
            print(f"  {e}")
            return 1

    classifier = NaiveBayesClassifier()
    classifier.fit(train_df['content'].tolist(), train_df['label'].tolist())
    print()

    if test_df is None:
        print_training_data(classifier)
        print_classifier_parameters(classifier)
        return 0

    y_true = test_df['label'].tolist()
    y_pred = print_predictions(classifier, test_df)

    if args.metrics or args.confusion_matrix:
        classes = sorted(set(y_true) | set(y_pred))
        if args.metrics:
            evaluate_classifier(y_true, y_pred, classes, save_path=args.metrics)
        if args.confusion_matrix:
            plot_confusion_matrix(y_true, y_pred, classes, save_path=args.confusion_matrix)
    return 0
