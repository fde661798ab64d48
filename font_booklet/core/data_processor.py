from collections import namedtuple

import pandas as pd

Family = namedtuple("Family", ["surname", "members"])

CATALOG_COLUMNS = ["family", "face", "style"]


class DataProcessor:
    """
    Core component for Pandas DataFrame manipulations.
    Derives what the font list shows from the catalog and the bookmark set.
    Never mutates its inputs.
    """

    def __init__(self):
        pass

    def visible_faces(self, catalog: pd.DataFrame, bookmarked, filtering: bool) -> pd.DataFrame:
        """
        Rows of the catalog to render, in catalog order.
        When filtering, only faces in `bookmarked` are kept.
        """
        if catalog is None or catalog.empty:
            return pd.DataFrame(columns=CATALOG_COLUMNS)

        if not filtering:
            return catalog.copy()

        mask = catalog['face'].isin(list(bookmarked))
        return catalog[mask].reset_index(drop=True)

    def group_families(self, df: pd.DataFrame):
        """
        Group rows by family in order of first appearance.
        Families with no rows simply do not appear.
        """
        if df is None or df.empty:
            return []

        families = []
        for surname, group in df.groupby('family', sort=False):
            families.append(Family(surname, tuple(group['face'])))
        return families

    def visible_families(self, catalog: pd.DataFrame, bookmarked, filtering: bool):
        return self.group_families(self.visible_faces(catalog, bookmarked, filtering))
