import os
import sys

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402


# Bar per number of tries, with games not solved within the limit in their own colour.
# Returns the (solved, failed) totals shown in the title.
def plot_distribution(csv_path, title, output_filename):
    df = pd.read_csv(csv_path, dtype={"Tries": str})
    failed = df["Tries"] == "fail"
    solved_total = int(df.loc[~failed, "Count"].sum())
    failed_total = int(df.loc[failed, "Count"].sum())

    plt.figure(figsize=(8, 5))
    plt.bar(df.loc[~failed, "Tries"], df.loc[~failed, "Count"], color="tab:green", label="solved")
    plt.bar(df.loc[failed, "Tries"], df.loc[failed, "Count"], color="tab:red", label="not solved")
    plt.xlabel("Guesses Used")
    plt.ylabel("Number of Solution Words")
    plt.title(f"{title} ({solved_total} solved, {failed_total} not solved)")
    plt.legend()
    plt.tight_layout()
    plt.savefig(output_filename)
    plt.close()
    print(f"Saved: {output_filename}")
    return solved_total, failed_total


if __name__ == "__main__":
    base_dir = sys.argv[1] if len(sys.argv) > 1 else os.path.dirname(__file__)

    for mode in ("normal", "hard"):
        plot_distribution(os.path.join(base_dir, f"{mode}_results.csv"),
                          f"{mode.capitalize()} Mode Guess Distribution",
                          os.path.join(base_dir, f"{mode}_plot.png"))
