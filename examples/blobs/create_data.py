import numpy as np

from shallownet.data.synthetic import make_blobs, save_csv

# Create the random number generator.
seed = 1234
rs = np.random.RandomState(seed)

# Four features and three classes, the same layout as the
# penguins data (bill length, bill depth, flipper length, body mass
# followed by a one-hot species encoding).
n_features = 4
n_classes = 3

training = make_blobs(n_per_class=40, n_features=n_features,
                      n_classes=n_classes, spread=0.3, rs=rs)
testing = make_blobs(n_per_class=15, n_features=n_features,
                     n_classes=n_classes, spread=0.3, rs=rs)

save_csv('train.csv', training)
save_csv('test.csv', testing)
