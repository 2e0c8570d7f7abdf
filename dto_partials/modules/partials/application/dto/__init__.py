# 📄 File: dto_partials/modules/partials/application/dto/__init__.py
# 🧭 Purpose (Layman Explanation):
# Makes the data object base classes importable from one place.
#
# 🧪 Purpose (Technical Summary):
# DTO package exports: Data, DataCollection and the DataCollectionOf annotation marker.
#
# 🔗 Dependencies:
# - dto_partials.modules.partials.application.dto.base_data
#
# 🔄 Connected Modules / Calls From:
# - Application code declaring data classes, transformers, presentation layer

from dto_partials.modules.partials.application.dto.base_data import Data, DataCollection, DataCollectionOf

__all__ = ["Data", "DataCollection", "DataCollectionOf"]
