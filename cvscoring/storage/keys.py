ANALYSIS_FILE_NAME = "analysis.json"
GOLDEN_PROFILE_FILE_NAME = "goldenCandidate.json"


def application_prefix(application_id: str) -> str:
    """Build the storage prefix for an application: applications/{id}"""
    return f"applications/{application_id}"


def cv_key(application_id: str, file_name: str) -> str:
    """Build the raw CV key: applications/{id}/{file_name}"""
    return f"{application_prefix(application_id)}/{file_name}"


def analysis_key(application_id: str) -> str:
    """Build the cached analysis key: applications/{id}/analysis.json"""
    return f"{application_prefix(application_id)}/{ANALYSIS_FILE_NAME}"


def golden_profile_key(job_id: str) -> str:
    """Build the golden profile key: jobs/{job_id}/goldenCandidate.json"""
    return f"jobs/{job_id}/{GOLDEN_PROFILE_FILE_NAME}"
