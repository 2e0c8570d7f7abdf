# 📄 File: dto_partials/modules/partials/application/transformers/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the tools that turn data objects into JSON.
#
# 🧪 Purpose (Technical Summary):
# Transformer package exports.
#
# 🔗 Dependencies:
# - dto_partials.modules.partials.application.transformers.data_transformer
#
# 🔄 Connected Modules / Calls From:
# - Data objects, presentation responses

from dto_partials.modules.partials.application.transformers.data_transformer import DataTransformer

__all__ = ["DataTransformer"]
