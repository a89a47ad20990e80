from devfolio.core.stats import (
    build_language_histogram,
    build_snapshot,
    normalize_repo_name,
    to_repo_summary,
)


def test_total_stars_and_forks_are_summed_across_repos(repo_node, user_payload):
    snapshot = build_snapshot(
        user_payload(
            repos=[
                repo_node("a", stars=5, forks=2),
                repo_node("b", stars=3, forks=1),
                repo_node("c", stars=0, forks=0),
            ]
        )
    )

    assert snapshot.stats.stars == 8
    assert snapshot.stats.forks == 3
    assert snapshot.stats.repositories == 3


def test_language_histogram_counts_each_repo_once_and_sorts_descending(repo_node):
    histogram = build_language_histogram(
        [repo_node("a", languages=["Go", "Rust"]), repo_node("b", languages=["Go"])]
    )

    assert [(lang.name, lang.count) for lang in histogram] == [("Go", 2), ("Rust", 1)]


def test_language_histogram_ignores_duplicate_languages_within_a_repo(repo_node):
    histogram = build_language_histogram([repo_node("a", languages=["Python", "Python"])])

    assert [(lang.name, lang.count) for lang in histogram] == [("Python", 1)]


def test_language_histogram_ties_keep_first_seen_order(repo_node):
    histogram = build_language_histogram(
        [repo_node("a", languages=["Shell"]), repo_node("b", languages=["C", "Go"])]
    )

    assert [lang.name for lang in histogram] == ["Shell", "C", "Go"]


def test_top_repositories_are_first_five_fetched(repo_node, user_payload):
    repos = [repo_node(f"r{i}", stars=100 - i) for i in range(8)]

    snapshot = build_snapshot(user_payload(repos=repos))

    assert [repo.name for repo in snapshot.top_repositories] == ["r0", "r1", "r2", "r3", "r4"]


def test_pinned_items_map_to_flat_repo_shape_and_skip_non_repositories(repo_node, user_payload):
    snapshot = build_snapshot(
        user_payload(pinned=[repo_node("pinned", stars=9, forks=4), {}, None])
    )

    assert len(snapshot.pinned_repositories) == 1
    pinned = snapshot.pinned_repositories[0]
    assert pinned.name == "pinned"
    assert pinned.stars == 9
    assert pinned.forks == 4
    assert pinned.url == "https://github.com/octocat/pinned"


def test_profile_and_contribution_fields_are_flattened(user_payload):
    snapshot = build_snapshot(user_payload())

    assert snapshot.user.login == "octocat"
    assert snapshot.user.followers == 42
    assert snapshot.user.following == 7
    assert snapshot.stats.contributions == 120
    assert snapshot.stats.pull_requests == 15
    assert snapshot.stats.issues == 4
    assert snapshot.languages == []


def test_snapshot_serializes_with_camel_case_keys(repo_node, user_payload):
    dumped = build_snapshot(user_payload(repos=[repo_node("a", stars=1)])).model_dump(
        by_alias=True
    )

    assert dumped["user"]["avatarUrl"].startswith("https://")
    assert dumped["stats"]["pullRequests"] == 15
    assert dumped["topRepositories"][0]["stars"] == 1
    assert "pinnedRepositories" in dumped


def test_repo_summary_keeps_null_description(repo_node):
    summary = to_repo_summary(repo_node("a", description=None))

    assert summary.description is None


def test_normalize_repo_name_strips_owner():
    assert [normalize_repo_name(name) for name in ["a", "owner/b"]] == ["a", "b"]
    assert normalize_repo_name("owner/") == "owner/"
