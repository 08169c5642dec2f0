__version__ = "0.1.0"

from ptgeom.parameters import SmoothingParameters, PCAParameters
from ptgeom.utils.validation import PointCloudError
from ptgeom.smoothing import moving_average, savitzky_golay, gaussian_filter, Filter, smooth
from ptgeom.pca import PCAResult, compute_pca
