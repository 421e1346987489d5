"""Hypothesis strategies for ghmodels settings and environments."""

from hypothesis import strategies as st

# Non-empty values as they would appear in an environment variable
env_value = st.text(
    min_size=1,
    max_size=200,
    alphabet=st.characters(whitelist_categories=("L", "N", "P", "S")),
)

model_name = st.text(
    min_size=1,
    max_size=50,
    alphabet=st.characters(whitelist_categories=("L", "N", "Pd")),
)

# Unrelated variables that must not influence the result
noise = st.dictionaries(
    keys=st.text(min_size=1, max_size=20, alphabet="ABCDEFGHIJKLMNOPQRSTUVWXYZ_"),
    values=env_value,
    max_size=5,
).map(lambda d: {k: v for k, v in d.items() if not k.startswith("GITHUB_MODELS_")})

environment_without_token = st.builds(
    lambda noise, endpoint, version: {
        **noise,
        **({"GITHUB_MODELS_ENDPOINT": endpoint} if endpoint else {}),
        **({"GITHUB_MODELS_API_VERSION": version} if version else {}),
    },
    noise=noise,
    endpoint=st.one_of(st.none(), env_value),
    version=st.one_of(st.none(), env_value),
)
