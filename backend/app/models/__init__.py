# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant que SQLAlchemy tente de résoudre les clés étrangères inter-modèles.
# profiles doit être chargé avant batches / students / assignments (FK sur profiles.user_id).

from app.models.profile import Profile  # noqa: F401  (doit précéder les autres)
from app.models.batch import Batch  # noqa: F401
from app.models.student import Student  # noqa: F401
from app.models.assignment import Assignment, AssignmentSubmission  # noqa: F401
from app.models.franchise_page import FranchisePage  # noqa: F401
