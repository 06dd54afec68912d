"""High precision constants, given to more digits than a double holds."""

# sqrt(2)
SQRT_2 = 1.4142135623730950488016887242096980785696718753769

# sqrt(2 * pi)
SQRT_2PI = 2.5066282746310005024157652848110452530069867406099

# ln(2)
LN_2 = 0.69314718055994530941723212145817656807550013436026

# ln(pi)
LN_PI = 1.1447298858494001741434273513530587116472948129153

# ln(sqrt(2 * pi))
LN_SQRT_2PI = 0.91893853320467274178032973640561763986139747363778

# ln(sqrt(2 * pi * e))
LN_SQRT_2PIE = 1.4189385332046727417803297364056176398613974736378

# ln(2 * sqrt(e / pi))
LN_2_SQRT_E_OVER_PI = 0.6207822376352452223455184457816472122518527279025978

# 2 * sqrt(e / pi)
TWO_SQRT_E_OVER_PI = 1.8603827342052657173362492472666631120594218414085755
