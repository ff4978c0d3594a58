import json
import os

import pandas as pd
from sklearn.model_selection import train_test_split


def _read_json_lines(filepath):
    data = []
    with open(filepath, 'r', encoding='utf-8') as f:
        for line in f:
            if not line.strip():
                continue
            try:
                data.append(json.loads(line))
            except json.JSONDecodeError:
                continue
    return pd.DataFrame(data)


def load_posts(filepath, label_column='tag', content_column='content'):
    """
    Load labeled posts from a CSV or JSON-lines file.

    Args:
        filepath: Path to a .csv, .json or .jsonl file
        label_column: Column holding the label of each post
        content_column: Column holding the post text

    Returns:
        DataFrame with 'label' and 'content' columns, one row per post.
        Empty cells are kept as empty strings.
    """
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"Data file not found: {filepath}")

    print(f"Loading data from {filepath}...")
    if str(filepath).lower().endswith(('.json', '.jsonl')):
        df = _read_json_lines(filepath)
    else:
        df = pd.read_csv(filepath, dtype=str, keep_default_na=False)

    for column in (label_column, content_column):
        if column not in df.columns:
            raise ValueError(f"Dataset must have a '{column}' column")

    df = df[[label_column, content_column]].rename(
        columns={label_column: 'label', content_column: 'content'}
    )
    df = df.fillna('').astype(str).reset_index(drop=True)

    print(f"Total samples: {len(df)}")
    if len(df):
        print("Label distribution:")
        print(df['label'].value_counts().to_string())
    return df


def split_posts(df, test_size=0.3, random_state=42):
    """Split posts into train and test frames, stratified by label when possible."""
    counts = df['label'].value_counts()
    stratify = df['label'] if len(counts) > 1 and counts.min() >= 2 else None

    train_df, test_df = train_test_split(
        df, test_size=test_size, random_state=random_state, stratify=stratify
    )
    return train_df.reset_index(drop=True), test_df.reset_index(drop=True)
