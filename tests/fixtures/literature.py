"""
Literature Search Test Fixtures
Generates /api/literature/search result payloads.
"""

from typing import List, Dict, Any, Optional


SAMPLE_TITLES = [
    "Hydroxyurea therapy in children with sickle cell anemia",
    "Voxelotor and hemoglobin response in sickle cell disease",
    "Crizanlizumab for the prevention of pain crises",
    "L-glutamine in sickle cell disease: a phase 3 trial",
    "Gene therapy with lovotibeglogene autotemcel",
    "Predictors of vaso-occlusive crisis in adolescents",
]


class LiteratureResultFactory:
    """Factory for generating literature search hits."""

    @classmethod
    def create(
        cls,
        index: int = 0,
        with_identifiers: bool = True,
        **kwargs
    ) -> Dict[str, Any]:
        """Create one search hit; relevance decreases with ``index``."""
        result: Dict[str, Any] = {
            "title": SAMPLE_TITLES[index % len(SAMPLE_TITLES)],
            "abstract_text": f"Abstract {index + 1}: outcomes reported for sickle cell disease cohorts.",
            "relevance_score": round(0.99 - index * 0.05, 2),
        }
        if with_identifiers:
            result["pmid"] = str(30000000 + index)
            result["doi"] = f"10.1000/scd.{index + 1:04d}"
        result.update(kwargs)
        return result

    @classmethod
    def create_batch(cls, count: int, with_identifiers: Optional[bool] = None) -> List[Dict[str, Any]]:
        """Create ``count`` hits in descending relevance; odd hits lack identifiers by default."""
        return [
            cls.create(
                index=index,
                with_identifiers=with_identifiers if with_identifiers is not None else index % 2 == 0,
            )
            for index in range(count)
        ]
